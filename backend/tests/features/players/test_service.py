"""Tests for PlayerService orchestration."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import IntegrityError

from player_catalog.core.enums import PlayerOrder, Profession, Race
from player_catalog.core.exceptions import BadRequestError, PlayerNotFoundError
from player_catalog.features.players.filters import by_banned, match_all
from player_catalog.features.players.repository import PlayerRepositoryInterface
from player_catalog.features.players.schemas import (
    PageRequest,
    PlayerCreate,
    PlayerUpdate,
)
from player_catalog.features.players.service import PlayerService


@pytest.fixture
def ix_payload() -> PlayerCreate:
    return PlayerCreate(
        name="Ix",
        title="Conqueror",
        race=Race.HUMAN,
        profession=Profession.WARRIOR,
        birthday=datetime(2010, 1, 1, tzinfo=timezone.utc),
        experience=0,
        banned=False,
    )


class TestCreatePlayer:
    @pytest.mark.asyncio
    async def test_create_derives_level_and_assigns_id(
        self, player_service, ix_payload
    ):
        player = await player_service.create_player(ix_payload)

        assert player.id > 0
        assert player.level == 0
        assert player.until_next_level == 100
        assert player.banned is False
        assert player.name == "Ix"

    @pytest.mark.asyncio
    async def test_create_ignores_client_supplied_derived_fields(self, player_service):
        payload = PlayerCreate.model_validate(
            {
                "id": 42,
                "name": "Gimli",
                "title": "Lord of the Caves",
                "race": "DWARF",
                "profession": "WARRIOR",
                "birthday": 1_262_304_000_000,
                "experience": 5_000,
                "level": 99,
                "untilNextLevel": 1,
            }
        )

        player = await player_service.create_player(payload)

        assert player.level == 9
        assert player.until_next_level == 500
        assert player.banned is False

    @pytest.mark.asyncio
    async def test_invalid_input_is_rejected_before_storage(
        self, player_service, ix_payload
    ):
        payload = ix_payload.model_copy(update={"title": "t" * 31})

        with pytest.raises(BadRequestError, match="Title is invalid"):
            await player_service.create_player(payload)

        assert await player_service.count_players(match_all()) == 0

    @pytest.mark.asyncio
    async def test_missing_name_surfaces_storage_error(
        self, player_service, ix_payload
    ):
        payload = ix_payload.model_copy(update={"name": None})

        with pytest.raises(IntegrityError):
            await player_service.create_player(payload)

    @pytest.mark.asyncio
    async def test_small_epoch_millis_birthday_is_rejected(self, player_service):
        # 1_500_000_000 ms is January 1970, not July 2017
        payload = PlayerCreate.model_validate(
            {
                "name": "Ix",
                "title": "Conqueror",
                "race": "HUMAN",
                "profession": "WARRIOR",
                "birthday": 1_500_000_000,
                "experience": 0,
            }
        )

        with pytest.raises(BadRequestError, match="Date is invalid"):
            await player_service.create_player(payload)


class TestGetPlayer:
    @pytest.mark.asyncio
    async def test_returns_stored_player(self, player_service, ix_payload):
        created = await player_service.create_player(ix_payload)

        assert await player_service.get_player(created.id) is created

    @pytest.mark.asyncio
    async def test_zero_id_is_bad_request(self, player_service):
        with pytest.raises(BadRequestError, match="Id is invalid"):
            await player_service.get_player(0)

    @pytest.mark.asyncio
    async def test_unknown_id_is_not_found(self, player_service):
        with pytest.raises(PlayerNotFoundError) as exc_info:
            await player_service.get_player(999_999)
        assert exc_info.value.player_id == 999_999

    @pytest.mark.asyncio
    async def test_unknown_64_bit_id_is_not_found(self, player_service):
        with pytest.raises(PlayerNotFoundError):
            await player_service.get_player(2**62)


class TestUpdatePlayer:
    @pytest.mark.asyncio
    async def test_experience_patch_recomputes_level_only(
        self, player_service, ix_payload
    ):
        created = await player_service.create_player(ix_payload)

        updated = await player_service.update_player(
            created.id, PlayerUpdate(experience=5_000)
        )

        assert updated.experience == 5_000
        assert updated.level == 9
        assert updated.until_next_level == 500
        assert updated.name == "Ix"
        assert updated.title == "Conqueror"
        assert updated.race == Race.HUMAN
        assert updated.profession == Profession.WARRIOR
        assert updated.banned is False

    @pytest.mark.asyncio
    async def test_patch_cannot_clear_a_ban(self, player_service, ix_payload):
        created = await player_service.create_player(
            ix_payload.model_copy(update={"banned": True})
        )

        updated = await player_service.update_player(
            created.id, PlayerUpdate(banned=False)
        )

        assert updated.banned is True

    @pytest.mark.asyncio
    async def test_patch_can_set_a_ban(self, player_service, ix_payload):
        created = await player_service.create_player(ix_payload)

        updated = await player_service.update_player(
            created.id, PlayerUpdate(banned=True)
        )

        assert updated.banned is True

    @pytest.mark.asyncio
    async def test_invalid_field_leaves_record_untouched(
        self, player_service, ix_payload
    ):
        created = await player_service.create_player(ix_payload)

        with pytest.raises(BadRequestError, match="Experience is invalid"):
            await player_service.update_player(
                created.id, PlayerUpdate(name="Renamed", experience=-1)
            )

        stored = await player_service.get_player(created.id)
        assert stored.name == "Ix"
        assert stored.experience == 0

    @pytest.mark.asyncio
    async def test_name_is_validated_on_update(self, player_service, ix_payload):
        created = await player_service.create_player(ix_payload)

        with pytest.raises(BadRequestError, match="Name is incorrect"):
            await player_service.update_player(
                created.id, PlayerUpdate(name="n" * 13)
            )

    @pytest.mark.asyncio
    async def test_unknown_id_is_not_found(self, player_service):
        with pytest.raises(PlayerNotFoundError):
            await player_service.update_player(999_999, PlayerUpdate(name="Ix"))

    @pytest.mark.asyncio
    async def test_birthday_patch_is_read_as_epoch_millis(
        self, player_service, ix_payload
    ):
        created = await player_service.create_player(ix_payload)

        with pytest.raises(BadRequestError, match="Date is invalid"):
            await player_service.update_player(
                created.id, PlayerUpdate.model_validate({"birthday": 1_500_000_000})
            )

        updated = await player_service.update_player(
            created.id, PlayerUpdate.model_validate({"birthday": 1_500_000_000_000})
        )
        assert updated.birthday_millis == 1_500_000_000_000


class TestDeletePlayer:
    @pytest.mark.asyncio
    async def test_deleted_player_is_gone(self, player_service, ix_payload):
        created = await player_service.create_player(ix_payload)
        player_id = created.id

        await player_service.delete_player(player_id)

        with pytest.raises(PlayerNotFoundError):
            await player_service.get_player(player_id)

    @pytest.mark.asyncio
    async def test_deleting_unknown_player_is_not_found(self, player_service):
        with pytest.raises(PlayerNotFoundError):
            await player_service.delete_player(999_999)


class TestListing:
    @pytest.mark.asyncio
    async def test_list_players_without_pagination(
        self, player_service, seeded_players
    ):
        players = await player_service.list_players(by_banned(True), PlayerOrder.ID)

        assert [p.name for p in players] == ["Gimli", "Azog"]

    @pytest.mark.asyncio
    async def test_list_players_page(self, player_service, seeded_players):
        page = await player_service.list_players_page(
            match_all(), PageRequest(page_number=0, page_size=3)
        )

        assert [p.name for p in page.items] == ["Ix", "Gimli", "Legolas"]
        assert page.total == 5
        assert page.pages == 2

    @pytest.mark.asyncio
    async def test_count_players(self, player_service, seeded_players):
        assert await player_service.count_players(by_banned(False)) == 3


class TestWithMockRepository:
    """The service never reaches storage when validation fails."""

    @pytest.fixture
    def mock_repository(self):
        return AsyncMock(spec=PlayerRepositoryInterface)

    @pytest.fixture
    def service(self, mock_repository):
        return PlayerService(mock_repository)

    @pytest.mark.asyncio
    async def test_create_validation_precedes_storage(
        self, service, mock_repository, ix_payload
    ):
        with pytest.raises(BadRequestError):
            await service.create_player(ix_payload.model_copy(update={"race": None}))

        mock_repository.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_bad_id_never_queries_storage(self, service, mock_repository):
        with pytest.raises(BadRequestError):
            await service.delete_player(-3)

        mock_repository.get_by_id.assert_not_awaited()
        mock_repository.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_storage_errors_propagate_unchanged(
        self, service, mock_repository
    ):
        failure = ConnectionError("database unavailable")
        mock_repository.count.side_effect = failure

        with pytest.raises(ConnectionError) as exc_info:
            await service.count_players(match_all())

        assert exc_info.value is failure
