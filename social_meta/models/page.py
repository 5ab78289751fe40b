from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class LogicalPage(BaseModel):
    """One generated page as reported by the host build."""

    model_config = ConfigDict(frozen=True)

    slug: str  # "index" is the root page
    title: str = ""
    description: str = ""
    image: Optional[str] = None

    @property
    def trimmed_slug(self) -> str:
        return self.slug.strip("/")

    @property
    def is_root(self) -> bool:
        return self.trimmed_slug == "index"


class PageManifest(BaseModel):
    """On-disk page list handed over by the page discovery step."""

    pages: List[LogicalPage]
