"""
Example encounter series - demonstrates the encounter resolver and reducer.

Run with ECOSYSTEM_LOG_LEVEL=DEBUG to see every decision the resolver makes.
"""

from ecosystem import (
    Carnivore,
    Herbivore,
    Omnivore,
    Organism,
    Plant,
    SeriesReducer,
    encounter,
)
from infra import LoggingSettings, configure_from_settings, get_logger

log = get_logger(__name__)

# Series described as plain config data; validated by OrganismSpec.
SERIES = [
    {"species": "deer", "role": "herbivore", "vitality": 6},
    {"species": "clover", "role": "plant", "vitality": 4},
    {"species": "deer", "role": "herbivore", "vitality": 9},
    {"species": "fox", "role": "carnivore", "vitality": 5},
    {"species": "bear", "role": "omnivore", "vitality": 30},
]


def show_pairs() -> None:
    pairs = [
        (Herbivore("deer", 10), Herbivore("deer", 20)),
        (Carnivore("wolf", 5), Carnivore("lynx", 5)),
        (Carnivore("wolf", 4), Herbivore("deer", 10)),
        (Herbivore("deer", 5), Plant("grass", 3)),
        (Omnivore("bear", 12), Carnivore("wolf", 7)),
    ]
    for first, second in pairs:
        result = encounter(first, second)
        log.info("%-18s %s", str(result.outcome), result.log)


def main() -> None:
    configure_from_settings(LoggingSettings.from_env())

    log.info("=" * 60)
    log.info("SINGLE ENCOUNTERS")
    log.info("=" * 60)
    show_pairs()

    log.info("=" * 60)
    log.info("SERIES REDUCTION")
    log.info("=" * 60)
    organisms = [Organism.from_dict(entry) for entry in SERIES]
    result = SeriesReducer().trace(organisms)
    for step, line in enumerate(result.logs, start=1):
        log.info("step %d: %s", step, line)
    log.info("Survivor: %s", result.survivor.label())


if __name__ == "__main__":
    main()
