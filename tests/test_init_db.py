from init_db import seed_admin
from models import BackUser
from utils.auth import verify_password


def test_seed_admin_is_created_once(db_session):
    assert seed_admin(db_session) is True
    assert seed_admin(db_session) is False

    admins = db_session.query(BackUser).all()
    assert len(admins) == 1
    assert admins[0].id == 1
    assert verify_password("admin", admins[0].password)
