"""Tests for SQLAlchemy ORM models."""

import pytest
from sqlalchemy import create_engine, select
from sqlalchemy.orm import Session

from charsheet.models import Base, Character, User


class TestUserModel:
    """User model tests."""

    def test_user_has_required_fields(self) -> None:
        """User model should have all required fields."""
        for field in ("id", "firebase_uid", "email", "name", "created_at", "updated_at"):
            assert hasattr(User, field)

    def test_user_table_name(self) -> None:
        assert User.__tablename__ == "users"

    def test_user_can_be_created(self) -> None:
        user = User(firebase_uid="uid-123", email="test@example.com", name="Tester")
        assert user.firebase_uid == "uid-123"
        assert user.name == "Tester"


class TestCharacterModel:
    """Character model tests."""

    def test_character_table_name(self) -> None:
        assert Character.__tablename__ == "characters"

    def test_class_column_keeps_wire_name(self) -> None:
        """The character_class attribute maps to the "class" column."""
        assert "class" in Character.__table__.columns
        assert Character.__table__.columns["class"].key == "character_class"

    def test_combat_fields_are_nullable(self) -> None:
        columns = Character.__table__.columns
        for field in ("max_hp", "current_hp", "armor_class", "notes"):
            assert columns[field].nullable is True

    def test_descriptive_fields_are_required(self) -> None:
        columns = Character.__table__.columns
        for field in ("name", "race", "class", "background", "level", "strength"):
            assert columns[field].nullable is False

    def test_user_id_cascades_on_delete(self) -> None:
        foreign_key = next(iter(Character.__table__.columns["user_id"].foreign_keys))
        assert foreign_key.ondelete == "CASCADE"

    def test_user_id_is_indexed(self) -> None:
        index_names = {index.name for index in Character.__table__.indexes}
        assert "idx_characters_user_id" in index_names


class TestDatabaseIntegration:
    """Database integration tests using SQLite in-memory."""

    @pytest.fixture
    def engine(self):
        """Create in-memory SQLite engine for testing."""
        engine = create_engine("sqlite:///:memory:", echo=False)
        Base.metadata.create_all(engine)
        return engine

    @pytest.fixture
    def session(self, engine):
        with Session(engine) as session:
            yield session

    @pytest.fixture
    def owner(self, session: Session) -> User:
        user = User(firebase_uid="uid-123", email="test@example.com", name="Tester")
        session.add(user)
        session.commit()
        return user

    def test_can_create_user_in_database(self, session: Session, owner: User) -> None:
        result = session.execute(select(User)).scalar_one()
        assert result.firebase_uid == "uid-123"
        assert result.id is not None
        assert result.created_at is not None

    def test_character_defaults_in_database(self, session: Session, owner: User) -> None:
        """Level and ability scores default when omitted."""
        character = Character(
            user_id=owner.id,
            name="Pip",
            race="Halfling",
            character_class="Rogue",
            background="Urchin",
        )
        session.add(character)
        session.commit()

        result = session.execute(select(Character)).scalar_one()
        assert result.level == 1
        assert result.strength == 10
        assert result.charisma == 10
        assert result.max_hp is None
        assert result.notes is None

    def test_character_class_round_trips(self, session: Session, owner: User) -> None:
        session.add(
            Character(
                user_id=owner.id,
                name="Ash",
                race="Tiefling",
                character_class="Warlock",
                background="Charlatan",
                current_hp=-4,
            )
        )
        session.commit()
        session.expire_all()

        result = session.execute(select(Character)).scalar_one()
        assert result.character_class == "Warlock"
        assert result.current_hp == -4

    def test_user_has_characters_relationship(self, session: Session, owner: User) -> None:
        session.add(
            Character(
                user_id=owner.id,
                name="Ash",
                race="Human",
                character_class="Fighter",
                background="Soldier",
            )
        )
        session.commit()

        session.refresh(owner)
        assert [c.name for c in owner.characters] == ["Ash"]

    def test_characters_deleted_with_user(self, session: Session, owner: User) -> None:
        session.add(
            Character(
                user_id=owner.id,
                name="Ash",
                race="Human",
                character_class="Fighter",
                background="Soldier",
            )
        )
        session.commit()

        session.delete(owner)
        session.commit()

        assert session.execute(select(Character)).scalars().all() == []
