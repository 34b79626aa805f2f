import logging
from typing import Tuple

from sqlalchemy.orm import Session

from auth import hash_pin
from models import Team, User, utc_now

logger = logging.getLogger(__name__)

DEFAULT_TEAM_NAME = "Test Firma"
DEFAULT_TEAM_EMAIL = "test@firma.dk"


def get_or_create_first_team(db: Session) -> Tuple[Team, bool]:
    team = db.query(Team).order_by(Team.id).first()
    if team:
        return team, False
    team = Team(name=DEFAULT_TEAM_NAME, contact_email=DEFAULT_TEAM_EMAIL, is_active=True)
    db.add(team)
    db.flush()
    logger.info("Created team %s (id=%s)", team.name, team.id)
    return team, True


def ensure_test_user(
    db: Session,
    employee_number: str = "1001",
    pin: str = "1234",
    name: str = "Test Chauffør",
) -> Tuple[User, bool, bool]:
    """
    Create the mobile-app test user, or reset its PIN if it already exists.

    Returns:
        (user, user_created, team_created)
    """
    team, team_created = get_or_create_first_team(db)
    pin_hash = hash_pin(pin)

    user = db.query(User).filter(User.employee_number == employee_number).first()
    if user:
        user.pin_hash = pin_hash
        user.updated_at = utc_now()
        created = False
    else:
        user = User(
            employee_number=employee_number,
            pin_hash=pin_hash,
            name=name,
            role="EMPLOYEE",
            team_id=team.id,
            is_active=True,
        )
        db.add(user)
        created = True

    db.commit()
    db.refresh(user)
    return user, created, team_created
