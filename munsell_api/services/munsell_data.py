"""Munsell reference table service"""
import json
import os
from typing import Optional, Tuple
from munsell_api.core.config import get_settings
from munsell_api.models.schemas import HueGroup

settings = get_settings()


class MunsellTable:
    """
    Read-only Munsell chart:
    - Hue groups in chart order (5R ... 10P)
    - Loaded once at startup, never mutated afterwards
    """

    def __init__(self, data_file: Optional[str] = None):
        self.data_file = data_file or settings.munsell_file
        self.groups: Tuple[HueGroup, ...] = ()
        self.loaded = False

    def load(self):
        """Load hue groups from JSON file"""
        if self.loaded:
            return

        if not os.path.exists(self.data_file):
            raise FileNotFoundError(f"Munsell data file not found: {self.data_file}")

        print(f"📚 Loading Munsell chart from {self.data_file}...")
        with open(self.data_file, 'r', encoding='utf-8') as f:
            raw = json.load(f)

        self.groups = tuple(HueGroup.model_validate(group) for group in raw)
        self.loaded = True
        print(f"✓ Loaded {len(self.groups)} hue groups ({self.get_swatch_count()} swatches)")

    def get_all(self) -> Tuple[HueGroup, ...]:
        """Return every hue group in chart order"""
        if not self.loaded:
            self.load()
        return self.groups

    def get_by_hue(self, hue: str) -> Optional[HueGroup]:
        """
        Get hue group by Munsell hue code

        Args:
            hue: Hue code (e.g. "5YR"), case-insensitive

        Returns:
            Hue group or None if not found
        """
        hue = hue.upper().strip()
        for group in self.get_all():
            if group.hue == hue:
                return group
        return None

    def get_count(self) -> int:
        """Return number of hue groups"""
        return len(self.get_all())

    def get_swatch_count(self) -> int:
        """Return total number of swatches"""
        return sum(len(group.colors) for group in self.get_all())


# Global instance
munsell_table = MunsellTable()
