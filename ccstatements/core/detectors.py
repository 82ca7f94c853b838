"""
Statement template loading.

A template describes how one issuer's statements are turned into text and
which header carries the billing period. Templates are YAML files; the
bundled ones live in ccstatements/templates/.
"""
from datetime import timedelta
from pathlib import Path
from typing import List, Literal, Optional
import logging

import yaml
from pydantic import BaseModel, Field, ValidationError

from .errors import IOFailure

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"
DEFAULT_TEMPLATE_ID = "gs_txtwrite"


class ConverterConfig(BaseModel):
    backend: Literal["command", "pdfplumber"] = "command"
    command: List[str] = Field(
        default_factory=lambda: ["gs", "-q", "-sDEVICE=txtwrite", "-o", "-", "{path}"]
    )


class StatementTemplate(BaseModel):
    """Configuration for one statement layout."""
    template_id: str = DEFAULT_TEMPLATE_ID
    converter: ConverterConfig = Field(default_factory=ConverterConfig)
    statement_suffixes: List[str] = Field(default_factory=lambda: [".pdf"])
    date_header: str = "Opening/Closing Date"
    lower_slack_days: int = Field(default=7, ge=0)

    @property
    def lower_slack(self) -> timedelta:
        return timedelta(days=self.lower_slack_days)


class TemplateDetector:
    """Loads statement templates from a directory of YAML files."""

    def __init__(self, templates_dir: Path = None):
        self.templates_dir = templates_dir or TEMPLATES_DIR
        self.templates = {}
        self._load_templates()

    def _load_templates(self):
        if not self.templates_dir.exists():
            logger.warning(f"Templates directory not found: {self.templates_dir}")
            return

        for yaml_file in sorted(self.templates_dir.glob("*.yaml")):
            template = load_template(yaml_file)
            self.templates[template.template_id] = template
            logger.debug(f"Loaded template: {template.template_id}")

    def get_template(self, template_id: str) -> Optional[StatementTemplate]:
        """Get template configuration by ID."""
        return self.templates.get(template_id)


def load_template(path: Path) -> StatementTemplate:
    """
    Load a statement template from a YAML file.

    Args:
        path: YAML file; missing keys take their defaults

    Returns:
        StatementTemplate

    Raises:
        IOFailure: If the file cannot be read or does not describe a template
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise IOFailure(f"loading template {path}: {e}") from e

    try:
        return StatementTemplate.model_validate(data)
    except ValidationError as e:
        raise IOFailure(f"invalid template {path}: {e}") from e


def default_template() -> StatementTemplate:
    """The bundled template, falling back to built-in defaults if it is missing."""
    template = TemplateDetector().get_template(DEFAULT_TEMPLATE_ID)
    return template or StatementTemplate()
