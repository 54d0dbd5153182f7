"""Command loop of the job board and its entry point."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from jobboard.controllers import (
    ApplyRecruitInfo,
    CancelApply,
    Controller,
    GetRecruitInfoList,
    Login,
    Logout,
    RegisterMember,
    RegisterRecruitInfo,
    SearchRecruitInfo,
    ShowApplyInfoList,
    ShowApplyStatistics,
    WithdrawMember,
)
from jobboard.server import INPUT_FILE_NAME, OUTPUT_FILE_NAME, Server

START_MESSAGE = "프로그램 시작 \n"
END_MESSAGE = "\n6.1 프로그램 종료 \n"


def _menu(server: Server) -> dict[tuple[int, int], Controller]:
    return {
        (1, 1): RegisterMember(server),
        (1, 2): WithdrawMember(server),
        (2, 1): Login(server),
        (2, 2): Logout(server),
        (3, 1): RegisterRecruitInfo(server),
        (3, 2): GetRecruitInfoList(server),
        (4, 1): SearchRecruitInfo(server),
        (4, 2): ApplyRecruitInfo(server),
        (4, 3): ShowApplyInfoList(server),
        (4, 4): CancelApply(server),
        (5, 1): ShowApplyStatistics(server),
    }


def do_task(server: Server) -> None:
    """Read menu selections from the server's input and run them until exit.

    Any selection that is not a known command (including 6 1) ends the
    session, as does the end of the input.
    """
    menu = _menu(server)
    server.write(START_MESSAGE)
    while True:
        try:
            selection = (server.read_int(), server.read_int())
        except EOFError:
            break
        controller = menu.get(selection)
        if controller is None:
            break
        controller.run()
    server.write(END_MESSAGE)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a session reading commands from a file and writing the report to another."""
    parser = argparse.ArgumentParser(prog="jobboard", description="Job board command processor.")
    parser.add_argument("input", nargs="?", default=INPUT_FILE_NAME, help="command file")
    parser.add_argument("output", nargs="?", default=OUTPUT_FILE_NAME, help="report file")
    args = parser.parse_args(argv)

    with open(args.input, encoding="utf-8") as fin, open(args.output, "w", encoding="utf-8") as fout:
        do_task(Server(fin, fout))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())