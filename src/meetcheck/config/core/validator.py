"""
Configuration validator module.

Validates the divisions, weightclasses and exemptions sections of a
CONFIG.toml and builds the typed Config from whatever entries survive.
"""

import logging
from typing import Any, Dict, List, Optional

from meetcheck.config.core.accessor import (
    Config,
    DivisionConfig,
    Exemption,
    ExemptionConfig,
    WeightClassConfig,
)
from meetcheck.primitives import (
    Age,
    Equipment,
    PrimitiveParseError,
    Sex,
    WeightClassKg,
    parse_date,
)
from meetcheck.report import Report

logger = logging.getLogger(__name__)


class ConfigValidator:
    """
    Validates a parsed CONFIG.toml tree.

    Every entry is checked independently so that one bad entry never hides
    problems in its siblings. Problems go to the Report; entries that break
    a hard invariant are left out of the result.
    """

    # Parsed in this order: weightclasses refer to divisions by name.
    SECTIONS = ('divisions', 'weightclasses', 'exemptions')

    def validate(self, root: Any, report: Report) -> Optional[Config]:
        """
        Validate an entire configuration.

        Args:
            root: Parsed TOML document
            report: Report receiving every problem found

        Returns:
            Config, or None if the file is too malformed to use
        """
        if not isinstance(root, dict):
            report.error("Root value must be a Table")
            return None

        if self._is_missing('divisions', root, report):
            return None
        divisions = self.parse_divisions(root['divisions'], report)

        if self._is_missing('weightclasses', root, report):
            return None
        weightclasses = self.parse_weightclasses(root['weightclasses'], divisions, report)

        if self._is_missing('exemptions', root, report):
            return None
        exemptions = self.parse_exemptions(root['exemptions'], report)

        for key in root:
            if key not in self.SECTIONS:
                report.error(f"Unknown section '{key}'")

        logger.debug(
            f"Validated {report.path}: {len(divisions)} divisions, "
            f"{len(weightclasses)} weightclasses, {len(exemptions)} exemptions"
        )
        return Config(divisions=divisions, weightclasses=weightclasses, exemptions=exemptions)

    def parse_divisions(self, value: Any, report: Report) -> List[DivisionConfig]:
        """
        Validate the divisions section.

        Args:
            value: Contents of the 'divisions' table
            report: Report receiving problems

        Returns:
            Accepted divisions in declaration order
        """
        acc: List[DivisionConfig] = []

        if not isinstance(value, dict):
            report.error("Section 'divisions' must be a Table")
            return acc

        for key, division in value.items():
            if not isinstance(division, dict):
                report.error(f"Value 'divisions.{key}' must be a Table")
                continue

            name = division.get('name')
            if not isinstance(name, str):
                report.error(f"Value '{key}.name' must be a String")
                continue

            # Duplicates are reported but still accepted.
            if any(seen.name == name for seen in acc):
                report.error(f"Division name '{name}' must be unique")

            # Standardize on the plural, "Masters" instead of "Master".
            if 'Master' in name and 'Masters' not in name:
                report.error(f"Division name '{name}' must use plural 'Masters'")

            min_age = self._parse_age(key, 'min', division, report)
            if min_age is None:
                continue
            max_age = self._parse_age(key, 'max', division, report)
            if max_age is None:
                continue

            if not self._is_valid_age_range(min_age, max_age):
                report.error(f"Division '{key}' has an invalid age range '{min_age}-{max_age}'")
                continue

            sex = None
            if 'sex' in division:
                try:
                    sex = Sex.parse(division['sex'])
                except PrimitiveParseError as e:
                    report.error(f"Failed parsing {key}.sex: {e}")

            equipment = None
            if 'equipment' in division:
                equipment = self._parse_equipment(key, division['equipment'], report)

            tested = None
            if 'tested' in division:
                raw = division['tested']
                if raw == 'Yes':
                    tested = True
                elif raw == 'No':
                    tested = False
                else:
                    report.error(f"Failed parsing {key}.tested: invalid '{raw}'")

            acc.append(DivisionConfig(
                name=name,
                min=min_age,
                max=max_age,
                sex=sex,
                equipment=equipment,
                tested=tested,
            ))

        return acc

    def parse_weightclasses(
        self,
        value: Any,
        divisions: List[DivisionConfig],
        report: Report,
    ) -> List[WeightClassConfig]:
        """
        Validate the weightclasses section.

        Args:
            value: Contents of the 'weightclasses' table
            divisions: Divisions accepted from the same file
            report: Report receiving problems

        Returns:
            Accepted weight class schemes in declaration order
        """
        acc: List[WeightClassConfig] = []

        if not isinstance(value, dict):
            report.error("Section 'weightclasses' must be a Table")
            return acc

        for key, weightclass in value.items():
            if not isinstance(weightclass, dict):
                report.error(f"Value 'weightclasses.{key}' must be a Table")
                continue

            raw_classes = weightclass.get('classes')
            if not isinstance(raw_classes, list):
                report.error(f"Value '{key}.classes' must be an Array")
                continue

            classes: List[WeightClassKg] = []
            for raw in raw_classes:
                try:
                    classes.append(WeightClassKg.parse(raw))
                except PrimitiveParseError as e:
                    report.error(f"Error in '{key}.classes': {e}")

            date_range = weightclass.get('date_range')
            if not isinstance(date_range, list):
                report.error(f"Value '{key}.date_range' must be an Array")
                continue
            if len(date_range) != 2:
                report.error(f"Array '{key}.date_range' must have 2 items")
                continue
            try:
                date_min = parse_date(date_range[0])
                date_max = parse_date(date_range[1])
            except PrimitiveParseError as e:
                report.error(f"Error in '{key}.date_range': {e}")
                continue
            if date_min > date_max:
                report.error(f"Array '{key}.date_range' must not end before it starts")
                continue

            raw_sex = weightclass.get('sex')
            if not isinstance(raw_sex, str):
                report.error(f"Value '{key}.sex' must be a String")
                continue
            try:
                sex = Sex.parse(raw_sex)
            except PrimitiveParseError as e:
                report.error(f"Error in '{key}.sex': {e}")
                continue

            indices = None
            if 'divisions' in weightclass:
                raw_divisions = weightclass['divisions']
                if not isinstance(raw_divisions, list):
                    report.error(f"Value '{key}.divisions' must be an Array")
                    continue
                indices = self._resolve_divisions(key, raw_divisions, divisions, report)

            # Ascending order is relied on by the weightclass consistency check.
            for prev, cur in zip(classes, classes[1:]):
                if prev >= cur:
                    report.error(
                        f"WeightClassKg '{prev}' occurs before '{cur}' in [weightclasses.{key}]"
                    )

            acc.append(WeightClassConfig(
                name=key,
                classes=classes,
                date_min=date_min,
                date_max=date_max,
                sex=sex,
                divisions=indices,
            ))

        return acc

    def parse_exemptions(self, value: Any, report: Report) -> List[ExemptionConfig]:
        """
        Validate the exemptions section.

        Args:
            value: Contents of the 'exemptions' table
            report: Report receiving problems

        Returns:
            One ExemptionConfig per meet folder, possibly with no exemptions
        """
        acc: List[ExemptionConfig] = []

        if not isinstance(value, dict):
            report.error("Section 'exemptions' must be a Table")
            return acc

        for key, raw_exemptions in value.items():
            if not isinstance(raw_exemptions, list):
                report.error(f"exemptions.{key} must be an Array")
                continue

            exemptions: List[Exemption] = []
            for raw in raw_exemptions:
                if not isinstance(raw, str):
                    report.error(f"exemptions.{key} must contain Strings")
                    continue
                try:
                    exemptions.append(Exemption.parse(raw))
                except PrimitiveParseError as e:
                    report.error(f"Error in exemptions.{key}: {e}")

            acc.append(ExemptionConfig(meet_folder=key, exemptions=exemptions))

        return acc

    @staticmethod
    def _is_missing(section: str, root: Dict[str, Any], report: Report) -> bool:
        if section in root:
            return False
        report.error(f"Missing the '{section}' table")
        return True

    def _parse_age(self, key: str, prop: str, division: Dict[str, Any], report: Report) -> Optional[Age]:
        if prop not in division:
            report.error(f"Division '{key}' is missing the property '{prop}'")
            return None
        try:
            return Age.parse(division[prop])
        except PrimitiveParseError as e:
            report.error(f"Failed parsing {key}.{prop}: {e}")
            return None

    @staticmethod
    def _is_valid_age_range(min_age: Age, max_age: Age) -> bool:
        if min_age == max_age or min_age.is_definitely_less_than(max_age):
            return True
        # is_definitely_less_than rejects {9.5, 10.5}, which is a fine range.
        return (min_age.is_approximate and max_age.is_approximate
                and min_age.value < max_age.value)

    def _parse_equipment(self, key: str, raw: Any, report: Report) -> Optional[List[Equipment]]:
        if isinstance(raw, list):
            if not raw:
                report.error(f"{key}.equipment cannot be empty")
            equipment = []
            for item in raw:
                try:
                    equipment.append(Equipment.parse(item))
                except PrimitiveParseError as e:
                    report.error(f"Error in {key}.equipment: {e}")
            return equipment

        if isinstance(raw, str):
            try:
                return [Equipment.parse(raw)]
            except PrimitiveParseError as e:
                report.error(f"Error in {key}.equipment: {e}")
                return None

        report.error(f"{key}.equipment must be a String or Array")
        return None

    def _resolve_divisions(
        self,
        key: str,
        names: List[Any],
        divisions: List[DivisionConfig],
        report: Report,
    ) -> List[int]:
        """Map division names to indices, skipping names that do not resolve."""
        positions = {}
        for i, division in enumerate(divisions):
            # First declaration wins for duplicated names.
            positions.setdefault(division.name, i)

        indices = []
        for name in names:
            if not isinstance(name, str):
                report.error(f"Array '{key}.divisions' may only contain Strings")
                continue
            if name not in positions:
                report.error(f"Invalid division '{name}' in {key}.divisions")
                continue
            indices.append(positions[name])
        return indices
