import logging
from typing import List

from sqlalchemy.orm import Session

from models import Team, User
from schemas import TeamAssignmentResult, UserTeamOut

logger = logging.getLogger(__name__)


def list_users(db: Session) -> List[UserTeamOut]:
    users = db.query(User).order_by(User.id).all()
    return [UserTeamOut.model_validate(u) for u in users]


def assign_default_team(
    db: Session,
    team_name: str = "Standard Team",
    contact_email: str = "admin@lonberegning.dk",
    team_role: str = "ADMIN",
) -> TeamAssignmentResult:
    """
    Attach every user without a team to the named team, creating the
    team first if needed. Users that already have a team are left alone.
    """
    team = db.query(Team).filter(Team.name == team_name).first()
    team_created = False
    if not team:
        team = Team(name=team_name, contact_email=contact_email)
        db.add(team)
        db.flush()
        team_created = True

    updated = []
    for user in db.query(User).filter(User.team_id.is_(None)).order_by(User.id).all():
        user.team_id = team.id
        user.team_role = team_role
        updated.append(user.employee_number)

    db.commit()
    logger.info("Assigned %d users to team %s", len(updated), team.id)

    return TeamAssignmentResult(
        team_id=team.id,
        team_name=team.name,
        team_created=team_created,
        updated_users=updated,
    )
