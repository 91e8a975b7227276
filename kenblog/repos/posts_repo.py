import logging
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)


class FilesystemPostsRepo:
    def __init__(self, content_dir):
        self.content_dir = Path(content_dir)

    def list_post_ids(self) -> List[str]:
        if not self.content_dir.is_dir():
            logger.warning(f"Content directory not found: {self.content_dir}")
            return []
        return sorted(
            path.relative_to(self.content_dir).as_posix()
            for path in self.content_dir.rglob("*.md")
            if path.is_file()
        )

    def read_post(self, post_id: str) -> Optional[str]:
        path = self.content_dir / post_id
        if not path.is_file():
            return None
        return path.read_text(encoding="utf-8")
