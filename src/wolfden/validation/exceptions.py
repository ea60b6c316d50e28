"""Validation exceptions."""

from .types import ValidationViolation

# Rule id prefix -> what the rule family checks
RULE_FAMILIES = {
    "R": "roster",
    "V": "victory",
}


def rule_family(rule_id: str) -> str:
    return RULE_FAMILIES.get(rule_id.split(".", 1)[0], "other")


class ValidationError(Exception):
    """Raised by StrictValidator when a game breaks a roster or victory rule."""

    def __init__(self, violations: list[ValidationViolation]):
        self.violations = violations
        super().__init__(f"{len(violations)} game rule(s) broken")

    @property
    def rule_ids(self) -> list[str]:
        return sorted({v.rule_id for v in self.violations})

    def __str__(self) -> str:
        if not self.violations:
            return "No game rules broken"
        lines = [f"{len(self.violations)} game rule(s) broken:"]
        for v in self.violations:
            lines.append(f"  {v.rule_id} ({rule_family(v.rule_id)}): {v.message}")
        return "\n".join(lines)
