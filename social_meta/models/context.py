from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict

from social_meta.models.page import LogicalPage


class BuildContext(BaseModel):
    """Everything the host build passes to the post-bake step."""

    project_path: str
    arguments: List[str] = []
    generated_pages: List[LogicalPage] = []

    @property
    def wwwroot_path(self) -> Path:
        return Path(f"{self.project_path.rstrip('/')}/wwwroot")

    @property
    def shell_path(self) -> Path:
        return self.wwwroot_path / "index.html"


class BuildSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    configuration: str = "debug"
    base_url: str = "/"
    base_url_explicit: bool = False
    """False when *base_url* fell back to ``"/"`` in a non-release build."""

    @property
    def is_release(self) -> bool:
        return self.configuration == "release"


class PipelineResult(BaseModel):
    skipped: bool
    base_url: str
    written: List[str] = []
