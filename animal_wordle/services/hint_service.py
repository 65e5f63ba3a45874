"""
Hint Service

Fetches a random fact about an animal from the Animals API (API Ninjas).
Every failure degrades to a fixed fallback hint; get_hint never raises.
"""

import random
from typing import Any, Dict, List, Optional

import requests

from ..config.game_settings import FALLBACK_HINT
from ..utils.game_logger import game_logger

HINT_PREFIX = "💡 Hint: "

# (field, label) in display order; slogan is shown without a label
HINT_FIELDS = [
    ("kingdom", "Kingdom: "),
    ("class", "Class: "),
    ("order", "Order: "),
    ("family", "Family: "),
    ("locations", "Found in: "),
    ("diet", "Diet: "),
    ("habitat", "Habitat: "),
    ("prey", "Preys on: "),
    ("top_speed", "Top speed: "),
    ("lifespan", "Lifespan: "),
    ("weight", "Weight: "),
    ("height", "Height: "),
    ("group_behavior", "Behavior: "),
    ("biggest_threat", "Biggest threat: "),
    ("most_distinctive_feature", "Distinctive feature: "),
    ("slogan", ""),
]

_NESTED_SECTIONS = ("taxonomy", "characteristics")


def _lookup(record: Dict[str, Any], key: str) -> Any:
    if key in record:
        return record[key]
    for section in _NESTED_SECTIONS:
        nested = record.get(section)
        if isinstance(nested, dict) and key in nested:
            return nested[key]
    return None


def _format_value(value: Any) -> Optional[str]:
    if isinstance(value, list):
        items = [str(item).strip() for item in value if str(item).strip()]
        return ", ".join(items) if items else None
    if isinstance(value, (str, int, float)) and not isinstance(value, bool):
        text = str(value).strip()
        return text or None
    return None


def extract_facts(payload: Any) -> List[str]:
    """Build labelled facts from the first record of an Animals API response."""
    if isinstance(payload, list):
        if not payload:
            return []
        payload = payload[0]
    if not isinstance(payload, dict):
        return []

    facts = []
    for key, label in HINT_FIELDS:
        text = _format_value(_lookup(payload, key))
        if text is not None:
            facts.append(f"{label}{text}")
    return facts


class HintService:
    """
    Best-effort hint lookups.

    A single GET per call, no retry. The random source is injected so tests
    and seeded servers pick the same fact.
    """

    def __init__(self,
                 api_url: str,
                 api_key: str,
                 timeout: float = 5.0,
                 rng: Optional[random.Random] = None):
        self.api_url = api_url
        self.api_key = api_key or ""
        self.timeout = timeout
        self.rng = rng or random.Random()

    def is_configured(self) -> bool:
        return len(self.api_key) > 10

    def fallback_hint(self) -> str:
        return FALLBACK_HINT

    def get_hint(self, animal_name: str) -> str:
        """Return a display hint for ``animal_name`` or the fallback hint."""
        if not self.is_configured():
            return self.fallback_hint()

        try:
            response = requests.get(
                self.api_url,
                params={"name": animal_name},
                headers={"X-Api-Key": self.api_key, "Accept": "application/json"},
                timeout=self.timeout,
            )
            if response.status_code != 200:
                game_logger.logger.warning(f"Animal API error: response code {response.status_code}")
                return self.fallback_hint()

            facts = extract_facts(response.json())
        except requests.RequestException as e:
            game_logger.logger.warning(f"Error fetching animal data for {animal_name}: {e}")
            return self.fallback_hint()
        except ValueError as e:
            game_logger.logger.warning(f"Error parsing animal data for {animal_name}: {e}")
            return self.fallback_hint()

        if not facts:
            return self.fallback_hint()

        return HINT_PREFIX + self.rng.choice(facts)


# Global service instance
_hint_service = None


def get_hint_service() -> Optional[HintService]:
    """Get the global hint service instance."""
    return _hint_service


def initialize_hint_service(config_class) -> HintService:
    """Initialize the global hint service instance from a Config class."""
    global _hint_service
    _hint_service = HintService(
        api_url=config_class.ANIMAL_API_URL,
        api_key=config_class.ANIMAL_API_KEY,
        timeout=config_class.HINT_TIMEOUT_SECONDS,
        rng=random.Random(config_class.RANDOM_SEED),
    )
    return _hint_service
