"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import Post
from board.domain.repository.post import PostRepository
from board.domain.value import AuthorName, PostId
from board.persistence.mappers import post_to_dict, row_to_post
from board.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.warn("Post not found", post_id=str(post_id))
                return None

            return row_to_post(row._asdict())

    async def exists(self, post_id: PostId) -> bool:
        """Check whether a post exists."""
        stmt = (
            select(func.count())
            .select_from(posts_table)
            .where(posts_table.c.id == post_id)
        )
        result = await self.session.execute(stmt)
        return (result.scalar() or 0) > 0

    async def find_all(self) -> List[Post]:
        """Find every post, newest first."""
        with logfire.span("post_repository.find_all"):
            stmt = select(posts_table).order_by(desc(posts_table.c.created_at))
            result = await self.session.execute(stmt)
            posts = [row_to_post(row._asdict()) for row in result.fetchall()]
            logfire.info("Found posts", count=len(posts))
            return posts

    async def search_by_title(self, query: str) -> List[Post]:
        """Case-insensitive substring search on titles, newest first."""
        with logfire.span("post_repository.search_by_title", query=query):
            # Escape LIKE wildcards so the query matches literally
            escaped = (
                query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
            )
            stmt = (
                select(posts_table)
                .where(posts_table.c.title.ilike(f"%{escaped}%", escape="\\"))
                .order_by(desc(posts_table.c.created_at))
            )
            result = await self.session.execute(stmt)
            posts = [row_to_post(row._asdict()) for row in result.fetchall()]
            logfire.info("Found posts by title", query=query, count=len(posts))
            return posts

    async def find_by_author(self, author: AuthorName) -> List[Post]:
        """Find posts by exact author string, newest first."""
        stmt = (
            select(posts_table)
            .where(posts_table.c.author == author.root)
            .order_by(desc(posts_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        with logfire.span("post_repository.save", post_id=str(post.id), title=post.title):
            existing = await self.exists(post.id)

            post_dict = post_to_dict(post)

            if existing:
                logfire.info("Updating existing post", post_id=str(post.id))
                stmt = (
                    posts_table.update()
                    .where(posts_table.c.id == post.id)
                    .values(**post_dict)
                )
            else:
                logfire.info(
                    "Inserting new post",
                    post_id=str(post.id),
                    title=post.title,
                    author=post.author.root,
                )
                stmt = posts_table.insert().values(**post_dict)

            await self.session.execute(stmt)
            await self.session.flush()
            logfire.info("Post saved successfully", post_id=str(post.id))
            return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post, its comments go with it through ON DELETE CASCADE."""
        stmt = posts_table.delete().where(posts_table.c.id == post_id)
        await self.session.execute(stmt)
        await self.session.flush()
