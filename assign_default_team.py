import json
import logging
import sys

from db import SessionLocal
from services.team_assignment import assign_default_team, list_users

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _dump(users):
    return json.dumps([u.model_dump() for u in users], indent=2, ensure_ascii=False)


def main(session_factory=SessionLocal) -> int:
    db = session_factory()
    try:
        print("Current users:")
        print(_dump(list_users(db)))

        result = assign_default_team(db)
        if result.team_created:
            print(f"\nCreated team: {result.team_name}")
        else:
            print(f"\nTeam exists: {result.team_name} ID: {result.team_id}")

        if result.updated_users:
            print(f"\nUpdated {len(result.updated_users)} users without team:")
            for number in result.updated_users:
                print(f"   {number} -> team {result.team_id}")
        else:
            print("\nAll users already have a team assigned")

        print("\nFinal user state:")
        print(_dump(list_users(db)))
        return 0
    except Exception as e:
        db.rollback()
        logger.exception("Team assignment failed")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
