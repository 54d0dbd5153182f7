"""Boundary classes: each reads one command's input and writes its report."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from jobboard.models import (
    ApplyInfoDetail,
    CompanyMember,
    LoginForm,
    MemberType,
    RecruitInfoDetail,
    RegisterForm,
    StatisticsDetail,
)
from jobboard.server import Server


class BasicUI(ABC):
    """Base of every interface; reads from and writes to the server's streams."""

    def __init__(self, server: Server):
        self.server = server

    @abstractmethod
    def start_interface(self):
        """Write the command's heading."""


class RegisterMemberUI(BasicUI):
    """Registration of a new member."""

    def start_interface(self):
        self.server.write("\n1.1. 회원가입\n")

    def enter_register_info(self) -> RegisterForm:
        """Read 'type name number id password' into a RegisterForm."""
        raw_type = self.server.read_int()
        name = self.server.read_token()
        number = self.server.read_token()
        user_id = self.server.read_token()
        secret = self.server.read_token()
        try:
            member_type = MemberType(raw_type)
        except ValueError:
            member_type = raw_type
        return RegisterForm(member_type, name, number, user_id, secret)

    def show_result(self, member):
        form = member.member_detail()
        self.server.write(
            f"> {int(form.member_type)} {form.name} {form.number} {form.user_id} {form.password}\n"
        )


class WithdrawMemberUI(BasicUI):
    """Withdrawal of the logged-in member."""

    def start_interface(self):
        self.server.write("\n1.2. 회원탈퇴\n")

    def show_result(self, user_id):
        self.server.write(f"> {user_id}\n")


class LoginUI(BasicUI):
    """Logging in."""

    def start_interface(self):
        self.server.write("\n2.1. 로그인\n")

    def request_login(self) -> LoginForm:
        """Read 'id password' into a LoginForm."""
        user_id = self.server.read_token()
        secret = self.server.read_token()
        return LoginForm(user_id, secret)

    def show_result(self, member):
        self.server.write(f"> {member.user_id} {member.password}\n")


class LogoutUI(BasicUI):
    """Logging out."""

    def start_interface(self):
        self.server.write("\n2.2. 로그아웃\n")

    def show_result(self, user_id):
        self.server.write(f"> {user_id}\n")


class RegisterRecruitInfoUI(BasicUI):
    """Registration of a recruitment notice by the logged-in company."""

    def start_interface(self):
        self.server.write("\n3.1. 채용 정보 등록 \n")

    def register_new_recruit(self) -> RecruitInfoDetail:
        """Read 'task personnel deadline' and attach the current company's name and number.

        Raises TypeError if the logged-in member is not a company member.
        """
        task = self.server.read_token()
        num_of_personnel = self.server.read_int()
        deadline = self.server.read_token()
        member = self.server.current_member
        if not isinstance(member, CompanyMember):
            raise TypeError("the logged-in member is not a company member")
        return RecruitInfoDetail(
            company_name=member.company_name,
            business_number=member.business_number,
            task=task,
            deadline=deadline,
            num_of_personnel=num_of_personnel,
        )

    def show_result(self, detail):
        self.server.write(f"> {detail.task} {detail.num_of_personnel} {detail.deadline}\n")


class GetRecruitInfoListUI(BasicUI):
    """Listing of the logged-in company's notices."""

    def start_interface(self):
        self.server.write("\n3.2 등록된 채용 정보 조회 \n")

    def show_result(self, detail):
        self.server.write(f"> {detail.task} {detail.num_of_personnel} {detail.deadline}\n")


class SearchRecruitInfoUI(BasicUI):
    """Search of notices by company name."""

    def start_interface(self):
        self.server.write("\n4.1. 채용 정보 검색\n")

    def search_company_name(self) -> str:
        """Read the company name to search for."""
        return self.server.read_token()

    def show_result(self, detail):
        self.server.write(
            f"> {detail.company_name} {detail.business_number} {detail.task} "
            f"{detail.num_of_personnel} {detail.deadline}\n"
        )


def _short_line(detail) -> str:
    if detail is None:
        return ">   \n"
    return f"> {detail.company_name} {detail.business_number} {detail.task}\n"


class ApplyRecruitInfoUI(BasicUI):
    """Application to a notice by business number."""

    def start_interface(self):
        self.server.write("\n4.2. 채용지원\n")

    def apply_recruit(self) -> str:
        """Read the business number of the notice to apply to."""
        return self.server.read_token()

    def show_result(self, detail: Optional[RecruitInfoDetail]):
        self.server.write(_short_line(detail))


class ShowApplyInfoListUI(BasicUI):
    """Listing of the logged-in member's applications."""

    def start_interface(self):
        self.server.write("\n4.3. 지원 정보 조회\n")

    def show_result(self, detail):
        self.server.write(
            f"> {detail.company_name} {detail.business_number} {detail.task} "
            f"{detail.num_of_personnel} {detail.deadline} \n"
        )


class CancelApplyUI(BasicUI):
    """Cancellation of an application by business number."""

    def start_interface(self):
        self.server.write("\n4.4. 지원취소\n")

    def cancel_apply(self) -> str:
        """Read the business number of the application to cancel."""
        return self.server.read_token()

    def show_result(self, detail: Optional[ApplyInfoDetail]):
        self.server.write(_short_line(detail))


class ShowApplyStatisticsUI(BasicUI):
    """Per-task application statistics."""

    def start_interface(self):
        self.server.write("\n5.1. 지원 정보 통계\n")

    def show_result(self, detail: StatisticsDetail):
        self.server.write(f"> {detail.task} {detail.count}\n")