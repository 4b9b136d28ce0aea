"""Tests for the build context, including the end-to-end pipeline."""

from pathlib import Path

from blogindex.context import SiteContext


class TestSiteContext:
    """Tests for SiteContext."""

    def test_end_to_end(self, sample_site: Path) -> None:
        """Test the full pipeline on a two-post tree."""
        context = SiteContext.build(sample_site, page_size=10)
        assert len(context.posts) == 2
        assert list(context.tags) == ["generics", "ts"]
        assert [entry.page for entry in context.pages] == [1]
        assert [entry.tag for entry in context.tag_pages] == ["generics", "ts"]

    def test_posts_are_newest_first(self, sample_site: Path) -> None:
        """Test that the context orders posts by date descending."""
        context = SiteContext.build(sample_site)
        assert [p.title for p in context.posts] == ["B", "A"]
        assert [p.title for p in context.newest(1)] == ["B"]

    def test_lookups(self, sample_site: Path) -> None:
        """Test tag, page and path lookups."""
        context = SiteContext.build(sample_site, page_size=1)
        assert [p.title for p in context.posts_for_tag("generics")] == ["B"]
        assert [p.title for p in context.posts_for_tag("ts")] == ["B", "A"]
        assert context.posts_for_tag("rust") == []
        assert [entry.page for entry in context.pages] == [1, 2]
        assert [p.title for p in context.posts_on_page(2)] == ["A"]
        found = context.find("posts/2025/07/07.md")
        assert found is not None and found.title == "A"
        assert context.find("posts/missing.md") is None

    def test_empty_site(self, tmp_path: Path) -> None:
        """Test that an empty tree still plans one listing page."""
        context = SiteContext.build(tmp_path)
        assert context.posts == ()
        assert context.tags == ()
        assert [entry.page for entry in context.pages] == [1]
        assert context.tag_pages == ()

    def test_to_data(self, sample_site: Path) -> None:
        """Test the JSON-ready view handed to the renderer."""
        context = SiteContext.build(sample_site / "posts", base=sample_site)
        data = context.to_data(base_url="/ai-blog/", newest=1)
        assert [p["title"] for p in data["posts"]] == ["B", "A"]
        assert data["posts"][0]["url"] == "/ai-blog/posts/2025/07/08"
        assert data["posts"][0]["date"] == "2025-07-08T00:00:00"
        assert data["posts"][0]["tags"] == ["ts", "generics"]
        assert data["newest"] == ["posts/2025/07/08.md"]
        assert data["tags"][0] == {
            "name": "generics",
            "url": "/ai-blog/tags/generics",
            "posts": ["posts/2025/07/08.md"],
        }
        assert data["pages"] == [
            {
                "page": 1,
                "url": "/ai-blog/posts/page/1",
                "posts": ["posts/2025/07/08.md", "posts/2025/07/07.md"],
            }
        ]
