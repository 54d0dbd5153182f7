"""Domain objects of the job board: members, recruitment notices and applications."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union


class MemberType(IntEnum):
    """Kind of member, as entered on the registration line."""

    COMPANY = 1
    GENERAL = 2


@dataclass
class RecruitInfoDetail:
    """Plain view of a recruitment notice."""

    company_name: str
    business_number: str
    task: str
    deadline: str
    num_of_personnel: int


@dataclass
class ApplyInfoDetail:
    """Plain view of an application made by a general member."""

    company_name: str
    business_number: str
    task: str
    deadline: str
    num_of_personnel: int


@dataclass
class StatisticsDetail:
    """Number of applications (or applicants) counted for one task."""

    task: str
    count: int


@dataclass
class RegisterForm:
    """Data needed to register a member, or describing a registered one."""

    member_type: Union[MemberType, int]
    name: str
    number: str
    user_id: str
    password: str


@dataclass
class LoginForm:
    """Credentials entered to log in."""

    user_id: str
    password: str


class RecruitInfo:
    """A recruitment notice owned by a company member."""

    def __init__(self, company_name, business_number, task, deadline, num_of_personnel):
        self.company_name = company_name
        self.business_number = business_number
        self.task = task
        self.deadline = deadline
        self.num_of_personnel = num_of_personnel
        self.num_of_applicants = 0
        print(f"채용 정보 생성 : {company_name} {task} {num_of_personnel} {deadline}")

    def detail(self):
        """Return the notice as a RecruitInfoDetail."""
        return RecruitInfoDetail(
            company_name=self.company_name,
            business_number=self.business_number,
            task=self.task,
            deadline=self.deadline,
            num_of_personnel=self.num_of_personnel,
        )

    def increase_apply_num(self):
        """Count one more applicant for this notice."""
        self.num_of_applicants += 1

    def __lt__(self, other):
        if not isinstance(other, RecruitInfo):
            return NotImplemented
        return self.company_name < other.company_name


class ApplyInfo:
    """An application to a recruitment notice, owned by a general member."""

    def __init__(self, company_name, business_number, task, deadline, num_of_personnel):
        self.company_name = company_name
        self.business_number = business_number
        self.task = task
        self.deadline = deadline
        self.num_of_personnel = num_of_personnel
        print(f"지원 정보 생성 : {company_name} {task} {num_of_personnel} {deadline}")

    def detail(self):
        """Return the application as an ApplyInfoDetail."""
        return ApplyInfoDetail(
            company_name=self.company_name,
            business_number=self.business_number,
            task=self.task,
            deadline=self.deadline,
            num_of_personnel=self.num_of_personnel,
        )

    def __lt__(self, other):
        if not isinstance(other, ApplyInfo):
            return NotImplemented
        return self.company_name < other.company_name


class Member:
    """A registered user identified by an id and a password."""

    def __init__(self, user_id, password):
        self.user_id = user_id
        self.password = password


class CompanyMember(Member):
    """A company that publishes recruitment notices."""

    def __init__(self, company_name, business_number, user_id, password):
        super().__init__(user_id, password)
        self.company_name = company_name
        self.business_number = business_number
        self._recruit_infos: list[RecruitInfo] = []
        print(f"1 회사회원 {company_name} {business_number} {user_id} {password}")

    def add_recruit_info(self, recruit_info):
        """Attach a new recruitment notice to this company."""
        self._recruit_infos.append(recruit_info)

    def list_recruit_infos(self):
        """Return the company's notices in the order they were added."""
        return list(self._recruit_infos)

    def member_detail(self):
        """Describe this member as a RegisterForm."""
        return RegisterForm(
            member_type=MemberType.COMPANY,
            name=self.company_name,
            number=self.business_number,
            user_id=self.user_id,
            password=self.password,
        )


class GeneralMember(Member):
    """A person who applies to recruitment notices."""

    def __init__(self, name, resident_number, user_id, password):
        super().__init__(user_id, password)
        self.name = name
        self.resident_number = resident_number
        self._apply_infos: list[ApplyInfo] = []
        print(f"2 일반 회원 {name} {resident_number} {user_id} {password}")

    def create_apply_info(self, recruit_detail):
        """Record an application built from a recruitment notice's detail."""
        apply_info = ApplyInfo(
            recruit_detail.company_name,
            recruit_detail.business_number,
            recruit_detail.task,
            recruit_detail.deadline,
            recruit_detail.num_of_personnel,
        )
        self._apply_infos.append(apply_info)
        return apply_info

    def cancel_apply_info(self, business_number) -> Optional[ApplyInfoDetail]:
        """Remove the first application to the given business number.

        Returns the removed application's detail, or None if there was none.
        """
        for index, apply_info in enumerate(self._apply_infos):
            if apply_info.business_number == business_number:
                del self._apply_infos[index]
                return apply_info.detail()
        return None

    def list_apply_infos(self):
        """Return the member's applications in the order they were made."""
        return list(self._apply_infos)

    def member_detail(self):
        """Describe this member as a RegisterForm."""
        return RegisterForm(
            member_type=MemberType.GENERAL,
            name=self.name,
            number=self.resident_number,
            user_id=self.user_id,
            password=self.password,
        )