"""
Community content and trends endpoints.
"""

from api.status import ApiResponse

from .base import Repository


class CommunityRepository(Repository):
    """News, posts, comments and community trends."""

    group = "community"

    def news(
        self,
        limit: int = 100,
        offset: int = 1,
        news_type: str = "all",
        content_type: str = "all",
        id: int | list[int] | None = None,
        slug: str | list[str] | None = None,
        symbol: str | list[str] | None = None,
        category: str | list[str] | None = None,
        language: str = "en",
    ) -> ApiResponse:
        """
        Get the latest news and community content.

        Args:
            limit: Number of results (default: 100)
            offset: 1-based start of the page (default: 1)
            news_type: "all", "news", "community" or "alexandria"
            content_type: "all", "news", "video" or "audio"
            id: Filter by cryptocurrency id(s)
            slug: Filter by cryptocurrency slug(s)
            symbol: Filter by cryptocurrency symbol(s)
            category: Filter by content category
            language: Content language code (default: "en")

        Returns:
            ApiResponse with a list of content items
        """
        return self._get("news", {
            "symbol": symbol,
            "slug": slug,
            "id": id,
            "limit": limit,
            "start": offset,
            "news_type": news_type,
            "content_type": content_type,
            "category": category,
            "language": language,
        })

    def posts(
        self,
        id: int | None = None,
        slug: str | None = None,
        symbol: str | None = None,
        last_score: int | None = None,
    ) -> ApiResponse:
        """Get the latest community posts, optionally for one cryptocurrency."""
        return self._get("latest", {
            "symbol": symbol,
            "slug": slug,
            "id": id,
            "last_score": last_score,
        })

    def top_posts(
        self,
        id: int | None = None,
        slug: str | None = None,
        symbol: str | None = None,
        last_score: int | None = None,
    ) -> ApiResponse:
        """Get the top community posts, optionally for one cryptocurrency."""
        return self._get("top", {
            "symbol": symbol,
            "slug": slug,
            "id": id,
            "last_score": last_score,
        })

    def comments(self, post_id: int) -> ApiResponse:
        """Get the comments of a post."""
        return self._get("comments", {"post_id": post_id})

    def trending_topic(self, limit: int = 5) -> ApiResponse:
        """Get the trending community topics."""
        return self._get("trending_topic", {"limit": limit})

    def trending_token(self, limit: int = 5) -> ApiResponse:
        """Get the trending community tokens."""
        return self._get("trending_token", {"limit": limit})
