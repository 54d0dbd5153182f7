import io

import pytest

from jobboard.app import END_MESSAGE, START_MESSAGE, do_task, main
from jobboard.models import CompanyMember, GeneralMember
from jobboard.server import Server

SCENARIO = (
    "1 1\n"
    "1 Acme biz1 acme password\n"
    "2 1\n"
    "acme password\n"
    "3 1\n"
    "dev 3 2024-01-01\n"
    "2 2\n"
    "1 1\n"
    "2 Kim rn1 kim password\n"
    "2 1\n"
    "kim password\n"
    "4 2\n"
    "biz1\n"
    "4 3\n"
    "6 1\n"
)

SCENARIO_OUTPUT = (
    "프로그램 시작 \n"
    "\n1.1. 회원가입\n> 1 Acme biz1 acme password\n"
    "\n2.1. 로그인\n> acme password\n"
    "\n3.1. 채용 정보 등록 \n> dev 3 2024-01-01\n"
    "\n2.2. 로그아웃\n> acme\n"
    "\n1.1. 회원가입\n> 2 Kim rn1 kim password\n"
    "\n2.1. 로그인\n> kim password\n"
    "\n4.2. 채용지원\n> Acme biz1 dev\n"
    "\n4.3. 지원 정보 조회\n> Acme biz1 dev 3 2024-01-01 \n"
    "\n6.1 프로그램 종료 \n"
)


def run_session(text):
    fout = io.StringIO()
    server = Server(io.StringIO(text), fout)
    do_task(server)
    return server, fout.getvalue()


def test_empty_input_writes_start_and_end():
    _, output = run_session("")
    assert output == START_MESSAGE + END_MESSAGE


def test_full_scenario_output():
    _, output = run_session(SCENARIO)
    assert output == SCENARIO_OUTPUT


def test_full_scenario_state():
    server, _ = run_session(SCENARIO)
    kinds = [type(member) for member in server.members]
    assert kinds == [CompanyMember, GeneralMember]
    company, general = server.members
    assert server.current_member is general
    assert [info.num_of_applicants for info in company.list_recruit_infos()] == [1]
    assert [app.business_number for app in general.list_apply_infos()] == ["biz1"]


def test_statistics_for_company_after_application():
    text = SCENARIO.replace("4 3\n6 1\n", "2 2\n2 1\nacme password\n5 1\n6 1\n")
    _, output = run_session(text)
    assert output.endswith("\n5.1. 지원 정보 통계\n> dev 1\n" + END_MESSAGE)


@pytest.mark.parametrize("selection", ["6 1", "6 2", "1 3", "7 1", "0 0"])
def test_exit_selection_stops_processing(selection):
    server, output = run_session(f"{selection}\n1 1\n1 Acme biz1 acme password\n")
    assert server.members == []
    assert output == START_MESSAGE + END_MESSAGE


def test_end_of_input_without_exit_command():
    server, output = run_session("1 1\n1 Acme biz1 acme password\n")
    assert [member.user_id for member in server.members] == ["acme"]
    assert output.endswith(END_MESSAGE)


def test_non_numeric_selection_raises():
    with pytest.raises(ValueError):
        run_session("one two\n")


def test_main_uses_default_files(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "input.txt").write_text(SCENARIO, encoding="utf-8")
    assert main([]) == 0
    assert (tmp_path / "output.txt").read_text(encoding="utf-8") == SCENARIO_OUTPUT


def test_main_with_explicit_paths(tmp_path):
    source = tmp_path / "commands.txt"
    target = tmp_path / "report.txt"
    source.write_text("6 1\n", encoding="utf-8")
    assert main([str(source), str(target)]) == 0
    assert target.read_text(encoding="utf-8") == START_MESSAGE + END_MESSAGE


def test_main_missing_input_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        main([str(tmp_path / "absent.txt"), str(tmp_path / "out.txt")])