"""Controllers: each carries out one menu command against the server's state."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from jobboard.models import (
    ApplyInfoDetail,
    CompanyMember,
    GeneralMember,
    LoginForm,
    Member,
    MemberType,
    RecruitInfo,
    RecruitInfoDetail,
    RegisterForm,
    StatisticsDetail,
)
from jobboard.server import Server
from jobboard.ui import (
    ApplyRecruitInfoUI,
    CancelApplyUI,
    GetRecruitInfoListUI,
    LoginUI,
    LogoutUI,
    RegisterMemberUI,
    RegisterRecruitInfoUI,
    SearchRecruitInfoUI,
    ShowApplyInfoListUI,
    ShowApplyStatisticsUI,
    WithdrawMemberUI,
)


class Controller(ABC):
    """Base of every command; works on the shared server state."""

    def __init__(self, server: Server):
        self.server = server

    @abstractmethod
    def run(self):
        """Read the command's input, carry it out and report the result."""

    def _current(self, kind):
        member = self.server.current_member
        if not isinstance(member, kind):
            raise TypeError(f"the logged-in member is not a {kind.__name__}")
        return member


class RegisterMember(Controller):
    """Registers a new company or general member."""

    def __init__(self, server: Server):
        super().__init__(server)
        self.ui = RegisterMemberUI(server)

    def create_new_member(self, form: RegisterForm) -> Member:
        """Build a member of the form's type and add it to the server.

        Raises ValueError for an unknown member type.
        """
        if form.member_type == MemberType.COMPANY:
            member = CompanyMember(form.name, form.number, form.user_id, form.password)
        elif form.member_type == MemberType.GENERAL:
            member = GeneralMember(form.name, form.number, form.user_id, form.password)
        else:
            raise ValueError(f"unknown member type: {form.member_type!r}")
        return self.server.register_member(member)

    def run(self):
        self.ui.start_interface()
        member = self.create_new_member(self.ui.enter_register_info())
        self.ui.show_result(member)


class WithdrawMember(Controller):
    """Removes the logged-in member from the server."""

    def __init__(self, server: Server):
        super().__init__(server)
        self.ui = WithdrawMemberUI(server)

    def delete_member(self, member: Member) -> str:
        """Remove the member and return its id."""
        return self.server.withdraw_member(member)

    def run(self):
        self.ui.start_interface()
        member = self._current(Member)
        self.ui.show_result(self.delete_member(member))


class Login(Controller):
    """Logs a member in by id and password."""

    def __init__(self, server: Server):
        super().__init__(server)
        self.ui = LoginUI(server)

    def check_validation(self, form: LoginForm) -> Optional[Member]:
        """Find the member with matching credentials and make it the current one.

        The current member becomes None when nobody matches.
        """
        found = next(
            (
                member
                for member in self.server.members
                if member.user_id == form.user_id and member.password == form.password
            ),
            None,
        )
        self.server.current_member = found
        return found

    def run(self):
        self.ui.start_interface()
        member = self.check_validation(self.ui.request_login())
        if member is None:
            print("로그인 실패 ")
            return
        self.ui.show_result(member)


class Logout(Controller):
    """Logs the current member out."""

    def __init__(self, server: Server):
        super().__init__(server)
        self.ui = LogoutUI(server)

    def run(self):
        self.ui.start_interface()
        member = self.server.current_member
        if member is not None:
            self.ui.show_result(member.user_id)
            self.server.current_member = None


class RegisterRecruitInfo(Controller):
    """Adds a recruitment notice to the logged-in company."""

    def __init__(self, server: Server):
        super().__init__(server)
        self.ui = RegisterRecruitInfoUI(server)

    def add_new_recruit_info(self, detail: RecruitInfoDetail) -> RecruitInfo:
        """Create a notice from the detail and attach it to the current company."""
        member = self._current(CompanyMember)
        info = RecruitInfo(
            detail.company_name,
            detail.business_number,
            detail.task,
            detail.deadline,
            detail.num_of_personnel,
        )
        member.add_recruit_info(info)
        return info

    def run(self):
        self.ui.start_interface()
        info = self.add_new_recruit_info(self.ui.register_new_recruit())
        self.ui.show_result(info.detail())


class GetRecruitInfoList(Controller):
    """Lists the logged-in company's notices, ordered by company name."""

    def __init__(self, server: Server):
        super().__init__(server)
        self.ui = GetRecruitInfoListUI(server)

    def run(self):
        member = self._current(CompanyMember)
        self.ui.start_interface()
        for info in sorted(member.list_recruit_infos()):
            self.ui.show_result(info.detail())


class SearchRecruitInfo(Controller):
    """Shows the notices of the company with a given name."""

    def __init__(self, server: Server):
        super().__init__(server)
        self.ui = SearchRecruitInfoUI(server)

    def show_company_recruit_infos(self, recruit_infos: Iterable[RecruitInfo]):
        """Report the notices, most recently added first."""
        for info in reversed(list(recruit_infos)):
            self.ui.show_result(info.detail())

    def run(self):
        self.ui.start_interface()
        company_name = self.ui.search_company_name()
        for member in self.server.members:
            if isinstance(member, CompanyMember) and member.company_name == company_name:
                self.show_company_recruit_infos(member.list_recruit_infos())
                break


class ApplyRecruitInfo(Controller):
    """Applies the logged-in general member to a company's latest notice."""

    def __init__(self, server: Server):
        super().__init__(server)
        self.ui = ApplyRecruitInfoUI(server)

    def add_new_apply_info(self, member: GeneralMember, detail: RecruitInfoDetail):
        """Record an application of the member to the notice described."""
        return member.create_apply_info(detail)

    def run(self):
        member = self._current(GeneralMember)
        self.ui.start_interface()
        business_number = self.ui.apply_recruit()
        detail: Optional[RecruitInfoDetail] = None
        for company in self.server.members:
            if isinstance(company, CompanyMember) and company.business_number == business_number:
                infos = company.list_recruit_infos()
                if infos:
                    latest = infos[-1]
                    latest.increase_apply_num()
                    detail = latest.detail()
                break
        if detail is not None:
            self.add_new_apply_info(member, detail)
        self.ui.show_result(detail)


class ShowApplyInfoList(Controller):
    """Lists the logged-in general member's applications by company name."""

    def __init__(self, server: Server):
        super().__init__(server)
        self.ui = ShowApplyInfoListUI(server)

    def run(self):
        member = self._current(GeneralMember)
        applications = sorted(member.list_apply_infos())
        self.ui.start_interface()
        for application in applications:
            self.ui.show_result(application.detail())


class CancelApply(Controller):
    """Cancels the logged-in general member's application to a business number."""

    def __init__(self, server: Server):
        super().__init__(server)
        self.ui = CancelApplyUI(server)

    def cancel_apply_info(self, member: GeneralMember, business_number: str) -> Optional[ApplyInfoDetail]:
        """Remove the member's application and return its detail, or None."""
        return member.cancel_apply_info(business_number)

    def run(self):
        member = self._current(GeneralMember)
        self.ui.start_interface()
        detail = self.cancel_apply_info(member, self.ui.cancel_apply())
        self.ui.show_result(detail)


class ShowApplyStatistics(Controller):
    """Reports per-task counts for the logged-in member."""

    def __init__(self, server: Server):
        super().__init__(server)
        self.ui = ShowApplyStatisticsUI(server)

    def general_member_statistics(self, member: GeneralMember) -> list[StatisticsDetail]:
        """Count the member's applications per task, in order of first appearance."""
        counts: dict[str, int] = {}
        for application in member.list_apply_infos():
            counts[application.task] = counts.get(application.task, 0) + 1
        return [StatisticsDetail(task, count) for task, count in counts.items()]

    def company_member_statistics(self, member: CompanyMember) -> list[StatisticsDetail]:
        """Sum the applicants of the company's notices per task, in order of first appearance."""
        counts: dict[str, int] = {}
        for info in member.list_recruit_infos():
            counts[info.task] = counts.get(info.task, 0) + info.num_of_applicants
        return [StatisticsDetail(task, count) for task, count in counts.items()]

    def run(self):
        self.ui.start_interface()
        member = self.server.current_member
        if isinstance(member, GeneralMember):
            result = self.general_member_statistics(member)
        elif isinstance(member, CompanyMember):
            result = self.company_member_statistics(member)
        else:
            return
        for detail in result:
            self.ui.show_result(detail)