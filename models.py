from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship, DeclarativeBase
from datetime import datetime, timezone

# - ALL DateTime fields store UTC time as naive datetime


def utc_now():
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Base(DeclarativeBase):
    pass

# ============================================================================
# TEAM MODEL
# ============================================================================

class Team(Base):
    __tablename__ = 'teams'

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    contact_email = Column(String(255), nullable=False)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=utc_now)

    users = relationship("User", back_populates="team")

    def __repr__(self):
        return f"<Team {self.name}>"


# ============================================================================
# USER MODEL
# ============================================================================

class User(Base):
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, index=True)
    employee_number = Column(String(20), unique=True, index=True, nullable=False)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=True)
    pin_hash = Column(String, nullable=True)

    role = Column(String(20), nullable=False, default="EMPLOYEE")  # ADMIN | PAYROLL_MANAGER | EMPLOYEE
    team_id = Column(Integer, ForeignKey('teams.id'), nullable=True)
    team_role = Column(String(20), nullable=True)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)

    # Relationships
    team = relationship("Team", back_populates="users")
    employee = relationship("Employee", back_populates="user", uselist=False)

    def __repr__(self):
        return f"<User {self.employee_number} ({self.role})>"


# ============================================================================
# EMPLOYEE MODEL
# ============================================================================

class Employee(Base):
    __tablename__ = 'employees'

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey('users.id'), unique=True, nullable=False)
    cpr_number = Column(String(11), unique=True, nullable=True)
    employee_number = Column(String(20), unique=True, nullable=False)

    # Employment terms
    job_category = Column(String(20), nullable=False)    # DRIVER | WAREHOUSE | MOVER | TERMINAL | RENOVATION
    agreement_type = Column(String(30), nullable=False)  # collective agreement code, e.g. 3F
    employment_date = Column(Date, nullable=False)
    anciennity = Column(Integer, nullable=False, default=0)
    work_time_type = Column(String(20), nullable=False)
    base_salary = Column(Numeric(10, 2), nullable=False)
    department = Column(String(100), nullable=True)
    location = Column(String(100), nullable=True)

    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)

    # Relationships
    user = relationship("User", back_populates="employee")

    __table_args__ = (UniqueConstraint('user_id', name='_user_id_uc'),)

    def __repr__(self):
        return f"<Employee {self.employee_number} ({self.job_category})>"
