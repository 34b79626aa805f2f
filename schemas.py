from pydantic import BaseModel, computed_field, Field, validator
from typing import Optional, Literal, List
from datetime import date
from decimal import Decimal

JobCategory = Literal["DRIVER", "WAREHOUSE", "MOVER", "TERMINAL", "RENOVATION"]
WorkTimeType = Literal["FULL_TIME", "PART_TIME", "HOURLY", "SALARIED", "SUBSTITUTE", "SHIFT_WORK"]
ProvisionOutcome = Literal["created", "already_exists", "user_not_found", "failed"]


# ============================================================================
# EMPLOYEE PROVISIONING
# ============================================================================

class EmployeeProvisioning(BaseModel):
    employee_number: str = "1001"
    job_category: JobCategory = "DRIVER"
    agreement_type: str = Field("3F", min_length=1, max_length=30)
    employment_date: date = date(2024, 1, 1)
    work_time_type: WorkTimeType = "FULL_TIME"
    base_salary: Decimal = Field(Decimal("25000"), ge=0)
    department: Optional[str] = "Transport"
    location: Optional[str] = "København"

    class Config:
        str_strip_whitespace = True

    @validator('employee_number')
    def validate_employee_number(cls, v):
        if not v:
            raise ValueError('employee_number must not be empty')
        return v


class ProvisionResult(BaseModel):
    """
    Outcome of a single provisioning attempt.

    already_exists is kept apart from created so callers can tell
    a fresh insert from an idempotent no-op; both map to exit code 0.
    """
    outcome: ProvisionOutcome
    employee_number: str
    user_id: Optional[int] = None
    user_name: Optional[str] = None
    employee_id: Optional[int] = None
    job_category: Optional[str] = None
    error: Optional[str] = None

    @computed_field
    @property
    def exit_code(self) -> int:
        return 0 if self.outcome in ("created", "already_exists") else 1


# ============================================================================
# TEAMS
# ============================================================================

class UserTeamOut(BaseModel):
    employee_number: str
    name: str
    email: Optional[str] = None
    team_id: Optional[int] = None
    team_role: Optional[str] = None

    class Config:
        from_attributes = True


class TeamAssignmentResult(BaseModel):
    team_id: int
    team_name: str
    team_created: bool
    updated_users: List[str] = []
