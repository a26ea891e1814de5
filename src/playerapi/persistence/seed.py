"""Reference squad used to populate an empty database."""

from __future__ import annotations

from datetime import date
from typing import List

from playerapi.models import Player

_SQUAD: List[dict] = [
    # Starting eleven
    dict(id=1, first_name="Damián", middle_name="Emiliano", last_name="Martínez", date_of_birth=date(1992, 9, 2),
         squad_number=23, position="Goalkeeper", abbr_position="GK", team="Aston Villa FC", league="Premier League",
         starting11=True),
    dict(id=2, first_name="Nahuel", last_name="Molina", date_of_birth=date(1998, 4, 6),
         squad_number=26, position="Right-Back", abbr_position="RB", team="Atlético Madrid", league="La Liga",
         starting11=True),
    dict(id=3, first_name="Cristian", middle_name="Gabriel", last_name="Romero", date_of_birth=date(1998, 4, 27),
         squad_number=13, position="Centre-Back", abbr_position="CB", team="Tottenham Hotspur",
         league="Premier League", starting11=True),
    dict(id=4, first_name="Nicolás", middle_name="Hernán Gonzalo", last_name="Otamendi",
         date_of_birth=date(1988, 2, 12), squad_number=19, position="Centre-Back", abbr_position="CB",
         team="SL Benfica", league="Liga Portugal", starting11=True),
    dict(id=5, first_name="Nicolás", middle_name="Alejandro", last_name="Tagliafico", date_of_birth=date(1992, 8, 31),
         squad_number=3, position="Left-Back", abbr_position="LB", team="Olympique Lyon", league="Ligue 1",
         starting11=True),
    dict(id=6, first_name="Ángel", middle_name="Fabián", last_name="Di María", date_of_birth=date(1988, 2, 14),
         squad_number=11, position="Right Winger", abbr_position="RW", team="SL Benfica", league="Liga Portugal",
         starting11=True),
    dict(id=7, first_name="Rodrigo", middle_name="Javier", last_name="de Paul", date_of_birth=date(1994, 5, 24),
         squad_number=7, position="Central Midfield", abbr_position="CM", team="Atlético Madrid", league="La Liga",
         starting11=True),
    dict(id=8, first_name="Enzo", middle_name="Jeremías", last_name="Fernández", date_of_birth=date(2001, 1, 17),
         squad_number=24, position="Central Midfield", abbr_position="CM", team="Chelsea FC",
         league="Premier League", starting11=True),
    dict(id=9, first_name="Alexis", last_name="Mac Allister", date_of_birth=date(1998, 12, 24),
         squad_number=20, position="Central Midfield", abbr_position="CM", team="Liverpool FC",
         league="Premier League", starting11=True),
    dict(id=10, first_name="Lionel", middle_name="Andrés", last_name="Messi", date_of_birth=date(1987, 6, 24),
         squad_number=10, position="Right Winger", abbr_position="RW", team="Inter Miami CF",
         league="Major League Soccer", starting11=True),
    dict(id=11, first_name="Julián", last_name="Álvarez", date_of_birth=date(2000, 1, 31),
         squad_number=9, position="Centre-Forward", abbr_position="CF", team="Atlético Madrid", league="La Liga",
         starting11=True),
    # Substitutes
    dict(id=13, first_name="Franco", middle_name="Daniel", last_name="Armani", date_of_birth=date(1986, 10, 16),
         squad_number=1, position="Goalkeeper", abbr_position="GK", team="River Plate",
         league="Copa de la Liga"),
    dict(id=14, first_name="Gerónimo", last_name="Rulli", date_of_birth=date(1992, 5, 20),
         squad_number=12, position="Goalkeeper", abbr_position="GK", team="Ajax Amsterdam", league="Eredivisie"),
    dict(id=15, first_name="Juan", middle_name="Marcos", last_name="Foyth", date_of_birth=date(1998, 1, 12),
         squad_number=2, position="Right-Back", abbr_position="RB", team="Villarreal", league="La Liga"),
    dict(id=16, first_name="Gonzalo", middle_name="Ariel", last_name="Montiel", date_of_birth=date(1997, 1, 1),
         squad_number=4, position="Right-Back", abbr_position="RB", team="Nottingham Forest",
         league="Premier League"),
    dict(id=17, first_name="Germán", middle_name="Alejo", last_name="Pezzella", date_of_birth=date(1991, 6, 27),
         squad_number=6, position="Centre-Back", abbr_position="CB", team="Real Betis", league="La Liga"),
    dict(id=18, first_name="Marcos", middle_name="Javier", last_name="Acuña", date_of_birth=date(1991, 10, 28),
         squad_number=8, position="Left-Back", abbr_position="LB", team="Sevilla FC", league="La Liga"),
    dict(id=19, first_name="Lisandro", last_name="Martínez", date_of_birth=date(1998, 1, 18),
         squad_number=25, position="Centre-Back", abbr_position="CB", team="Manchester United",
         league="Premier League"),
    dict(id=20, first_name="Guido", last_name="Rodríguez", date_of_birth=date(1994, 4, 12),
         squad_number=18, position="Defensive Midfield", abbr_position="DM", team="Real Betis", league="La Liga"),
    dict(id=21, first_name="Alejandro", middle_name="Darío", last_name="Gómez", date_of_birth=date(1988, 2, 15),
         squad_number=17, position="Left Winger", abbr_position="LW", team="AC Monza", league="Serie A"),
    dict(id=22, first_name="Exequiel", middle_name="Alejandro", last_name="Palacios", date_of_birth=date(1998, 10, 5),
         squad_number=14, position="Central Midfield", abbr_position="CM", team="Bayer 04 Leverkusen",
         league="Bundesliga"),
    dict(id=23, first_name="Thiago", middle_name="Ezequiel", last_name="Almada", date_of_birth=date(2001, 4, 26),
         squad_number=16, position="Attacking Midfield", abbr_position="AM", team="Atlanta United FC",
         league="Major League Soccer"),
    dict(id=24, first_name="Paulo", middle_name="Exequiel", last_name="Dybala", date_of_birth=date(1993, 11, 15),
         squad_number=21, position="Second Striker", abbr_position="SS", team="AS Roma", league="Serie A"),
    dict(id=25, first_name="Lautaro", middle_name="Javier", last_name="Martínez", date_of_birth=date(1997, 8, 22),
         squad_number=22, position="Centre-Forward", abbr_position="CF", team="Inter Milan", league="Serie A"),
    dict(id=26, first_name="Ángel", middle_name="Martín", last_name="Correa", date_of_birth=date(1995, 3, 9),
         squad_number=15, position="Right Winger", abbr_position="RW", team="Atlético Madrid", league="La Liga"),
]


def squad() -> List[Player]:
    """Every player of the reference squad."""
    return [Player(**row) for row in _SQUAD]


def starting_eleven() -> List[Player]:
    return [player for player in squad() if player.starting11]


def player_by_id(player_id: int) -> Player:
    for player in squad():
        if player.id == player_id:
            return player
    raise KeyError(player_id)


def new_player() -> Player:
    """A squad member deliberately left out of the seed, used to exercise inserts."""
    return Player(
        id=12,
        first_name="Leandro",
        middle_name="Daniel",
        last_name="Paredes",
        date_of_birth=date(1994, 6, 29),
        squad_number=5,
        position="Defensive Midfield",
        abbr_position="DM",
        team="AS Roma",
        league="Serie A",
        starting11=False,
    )


__all__ = ["squad", "starting_eleven", "player_by_id", "new_player"]
