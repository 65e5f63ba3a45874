"""
Game Configuration Constants Module

This module defines the game rules and the curated endangered-animal list
used to seed the word store. All game parameters are centralized here to
enable easy modification.
"""

import json
import os
from typing import Dict, Final, List

# Core Game Configuration Constants
MAX_ATTEMPTS: Final[int] = 6
"""
Maximum number of guess attempts allowed per round.
Type: Final[int] - Immutable to prevent accidental modification
"""

ALPHABET: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

MIN_WORD_LENGTH: Final[int] = 3
MAX_WORD_LENGTH: Final[int] = 10

FALLBACK_HINT: Final[str] = "💡 Hint: Try thinking about endangered animals!"

_REQUIRED_FIELDS = ("name", "fun_fact", "endangered_reason")


def _check_animal_entry(index: int, entry: Dict[str, str]) -> None:
    for field in _REQUIRED_FIELDS:
        value = entry.get(field)
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"Animal at index {index} is missing '{field}'")

    name = entry["name"]
    if not MIN_WORD_LENGTH <= len(name) <= MAX_WORD_LENGTH:
        raise ValueError(
            f"Animal at index {index} '{name}' must be {MIN_WORD_LENGTH}-{MAX_WORD_LENGTH} characters long"
        )
    if not name.isalpha() or not name.isascii():
        raise ValueError(f"Animal at index {index} '{name}' contains non-alphabetic characters")


# Load animal list from JSON file
def _load_animal_list() -> List[Dict[str, str]]:
    """
    Load the seed animal list from animals.json.

    Returns:
        List[Dict[str, str]]: Entries with uppercase ``name``, ``fun_fact``
        and ``endangered_reason``

    Raises:
        FileNotFoundError: If animals.json file is not found
        ValueError: If JSON is malformed, the list is empty or an entry is invalid
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'animals.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            animal_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Animal list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in animals.json: {e}") from e

    if not isinstance(animal_list, list):
        raise ValueError("JSON file must contain an array of animals")

    if not animal_list:
        raise ValueError("Animal list cannot be empty")

    normalized = []
    for index, entry in enumerate(animal_list):
        if not isinstance(entry, dict):
            raise ValueError(f"Animal at index {index} must be an object")
        _check_animal_entry(index, entry)
        normalized.append({
            "name": entry["name"].upper(),
            "fun_fact": entry["fun_fact"].strip(),
            "endangered_reason": entry["endangered_reason"].strip(),
        })

    return normalized


# Curated animal database loaded from JSON file
ANIMAL_LIST: Final[List[Dict[str, str]]] = _load_animal_list()


def validate_animal_list_integrity(animal_list: List[Dict[str, str]] = None) -> bool:
    """
    Validates the integrity and consistency of the animal database.

    This function performs validation to ensure:
    1. Length validation: every name is between the min and max word length
    2. Character validation: only alphabetic characters allowed
    3. Uniqueness validation: no duplicate names
    4. Format validation: names are uppercase, descriptions are non-empty

    Returns:
        bool: True if the list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if animal_list is None:
        animal_list = ANIMAL_LIST

    if not animal_list:
        raise ValueError("Animal list cannot be empty")

    for index, entry in enumerate(animal_list):
        _check_animal_entry(index, entry)
        if not entry["name"].isupper():
            raise ValueError(f"Animal at index {index} '{entry['name']}' is not in uppercase format")

    names = [entry["name"] for entry in animal_list]
    if len(names) != len(set(names)):
        duplicates = sorted({name for name in names if names.count(name) > 1})
        raise ValueError(f"Duplicate animals found in animal list: {duplicates}")

    return True


def get_animal_statistics(animal_list: List[Dict[str, str]] = None) -> dict:
    """
    Analyzes the animal list and returns statistical information.

    Returns:
        dict: total_animals, word_lengths (length -> count), avg_vowel_count,
        letter_frequency and most_common_letters
    """
    if animal_list is None:
        animal_list = ANIMAL_LIST

    if not animal_list:
        return {"error": "Animal list is empty"}

    names = [entry["name"] for entry in animal_list]
    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in name if char in vowels]) for name in names)

    word_lengths = {}
    letter_frequency = {}
    for name in names:
        word_lengths[len(name)] = word_lengths.get(len(name), 0) + 1
        for char in name:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_animals": len(names),
        "word_lengths": word_lengths,
        "avg_vowel_count": round(total_vowels / len(names), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":

    try:
        validate_animal_list_integrity()
        print(" Animal list validation passed")

        stats = get_animal_statistics()
        print(f" Animal statistics: {stats}")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
