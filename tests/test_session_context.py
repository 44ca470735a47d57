"""
Tests for SessionContext: reading and writing the two cookie values.
"""
from models.users import User
from utils.session_context import SESSION_FAMILY_KEY, SESSION_USER_KEY, SessionContext


class TestFromSession:
    def test_empty_store_is_anonymous(self):
        ctx = SessionContext.from_session({})

        assert ctx.is_identified is False
        assert ctx.family_id is None

    def test_reads_both_ids(self):
        ctx = SessionContext.from_session({SESSION_USER_KEY: 4, SESSION_FAMILY_KEY: 2})

        assert ctx.is_identified is True
        assert (ctx.user_id, ctx.family_id) == (4, 2)

    def test_string_ids_are_coerced(self):
        ctx = SessionContext.from_session({SESSION_USER_KEY: '4', SESSION_FAMILY_KEY: 'x'})

        assert ctx.user_id == 4
        assert ctx.family_id is None


class TestTransitions:
    def test_identify_takes_both_ids_from_user(self):
        ctx = SessionContext(user_id=1, family_id=1)

        ctx.identify(User(id=9, name='N', color='teal', family_id=5))

        assert (ctx.user_id, ctx.family_id) == (9, 5)

    def test_switch_user_keeps_family_by_default(self):
        ctx = SessionContext(user_id=1, family_id=1)

        ctx.switch_user(7)

        assert (ctx.user_id, ctx.family_id) == (7, 1)

    def test_switch_user_with_family(self):
        ctx = SessionContext(user_id=1, family_id=1)

        ctx.switch_user(7, family_id=3)

        assert (ctx.user_id, ctx.family_id) == (7, 3)


class TestSave:
    def test_save_writes_both_keys(self):
        store = {}
        SessionContext(user_id=3, family_id=2).save(store)

        assert store == {SESSION_USER_KEY: 3, SESSION_FAMILY_KEY: 2}

    def test_clear_then_save_removes_keys(self):
        store = {SESSION_USER_KEY: 3, SESSION_FAMILY_KEY: 2, 'other': 'kept'}
        ctx = SessionContext.from_session(store)

        ctx.clear()
        ctx.save(store)

        assert store == {'other': 'kept'}
