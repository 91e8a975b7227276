import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from kenblog.i18n import Lang


class PostData(BaseModel):
    """Frontmatter of a post."""

    model_config = ConfigDict(extra="ignore")

    title: str
    date: str  # ISO string
    description: str
    tags: List[str] = Field(default_factory=list)
    lang: Lang
    cover: Optional[str] = None
    coverAlt: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def convert_date(cls, value):
        # YAML turns unquoted dates into date/datetime objects
        if isinstance(value, (datetime.date, datetime.datetime)):
            return value.isoformat()
        return value

    @field_validator("date")
    @classmethod
    def check_iso_date(cls, value: str) -> str:
        parse_iso_date(value)
        return value


class Post(BaseModel):
    id: str
    slug: str
    data: PostData
    body: str = ""

    @property
    def lang(self) -> str:
        return self.data.lang

    @property
    def published(self) -> datetime.datetime:
        return parse_iso_date(self.data.date)

    @property
    def url(self) -> str:
        return f"/{self.data.lang}/posts/{self.slug}/"


class PostSummary(BaseModel):
    id: str
    slug: str
    lang: Lang
    title: str
    date: str
    description: str
    tags: List[str] = Field(default_factory=list)
    cover: Optional[str] = None
    coverAlt: Optional[str] = None
    url: str

    @classmethod
    def from_post(cls, post: Post) -> "PostSummary":
        return cls(
            id=post.id,
            slug=post.slug,
            url=post.url,
            **post.data.model_dump(),
        )


class PostDetail(PostSummary):
    content: str  # Markdown content without frontmatter
    html: str
    alternate: Optional[str] = None


def parse_iso_date(value: str) -> datetime.datetime:
    """
    Parse an ISO date or datetime; values without an offset are taken as UTC.

    Raises ValueError for anything fromisoformat rejects.
    """
    parsed = datetime.datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=datetime.timezone.utc)
    return parsed
