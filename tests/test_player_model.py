from datetime import date

import pytest
from pydantic import ValidationError

from playerapi.models import Player


def test_player_accepts_camel_case_payload():
    player = Player.model_validate(
        {
            "id": 10,
            "firstName": "Lionel",
            "middleName": "Andrés",
            "lastName": "Messi",
            "dateOfBirth": "1987-06-24",
            "squadNumber": 10,
            "position": "Right Winger",
            "abbrPosition": "RW",
            "starting11": True,
        }
    )

    assert player.first_name == "Lionel"
    assert player.date_of_birth == date(1987, 6, 24)
    assert player.starting11 is True
    assert player.team is None
    assert player.full_name == "Lionel Andrés Messi"


def test_player_dumps_camel_case_aliases():
    player = Player(id=2, first_name="Nahuel", last_name="Molina", squad_number=26, position="Right-Back")

    payload = player.model_dump(mode="json", by_alias=True)

    assert payload["firstName"] == "Nahuel"
    assert payload["squadNumber"] == 26
    assert payload["middleName"] is None
    assert payload["starting11"] is False
    assert player.full_name == "Nahuel Molina"


@pytest.mark.parametrize(
    "overrides",
    [
        {"id": 0},
        {"first_name": ""},
        {"squad_number": 100},
        {"position": ""},
    ],
)
def test_player_rejects_invalid_fields(overrides):
    fields = dict(id=1, first_name="Damián", last_name="Martínez", squad_number=23, position="Goalkeeper")
    fields.update(overrides)

    with pytest.raises(ValidationError):
        Player(**fields)


def test_player_is_mutable():
    player = Player(id=1, first_name="Damián", last_name="Martínez", squad_number=23, position="Goalkeeper")

    player.first_name = "Emiliano"

    assert player.first_name == "Emiliano"
