"""Demonstration program: parses a few festivals and prints the agenda."""

import logging

from festivals.domain import DomainError, Festival
from festivals.logging_config import configure_logging
from festivals.services import load_bundled_festivals, parse_line
from festivals.settings import Settings
from festivals.stores import InMemoryAgenda

logger = logging.getLogger(__name__)

SAMPLE_LINES = (
    "Gazpatxo Rock : valencia: 28-02-2022  :1  :rock:punk : hiphop ",
    "black sound fest:badajoz:05-02-2022:  21:rock:  blues",
    "guitar bcn:barcelona: 28-01-2022 :  170:indie:pop:fusion",
    "  benidorm fest:benidorm:26-01-2022:3:indie: pop  :rock",
)


def describe_order(first: Festival, second: Festival) -> str:
    if first.starts_before(second):
        return f"{first.name} empieza antes que {second.name}"
    if first.starts_after(second):
        return f"{first.name} empieza después que {second.name}"
    return f"{first.name} empieza el mismo día que {second.name}"


def main() -> int:
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    try:
        print("Probando clase Festival")
        gazpatxo, black_sound, _, benidorm = festivals = [
            parse_line(line) for line in SAMPLE_LINES
        ]
        for festival in festivals:
            print(festival)

        print("\nProbando empiezaAntesQue() empiezaDespuesQue()\n")
        print(describe_order(gazpatxo, black_sound))

        print("\nProbando haConcluido()\n")
        for festival in (benidorm, gazpatxo):
            print(festival)
            print(f"{festival.name} ha concluido? {festival.has_concluded()}")

        print("\nAgenda de festivales\n")
        agenda = InMemoryAgenda()
        load_bundled_festivals(agenda, settings)
        print(agenda)
    except DomainError as exc:
        logger.error("%s", exc)
        return 1
    return 0
