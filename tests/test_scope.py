import pytest

from link_checker.crawler.scope import Scope, ScopeMode
from link_checker.exceptions import InvalidURL


def test_path_prefix_scope(widgets_scope):
    assert widgets_scope.seed_path_prefix == "/products/widgets/"
    assert widgets_scope.is_in_scope("https://example.com/products/widgets/item1/")
    assert widgets_scope.is_in_scope("https://example.com/products/widgets/specs.html")
    assert widgets_scope.is_in_scope("https://example.com/products/widgets/")
    assert not widgets_scope.is_in_scope("https://example.com/products/gadgets/item2/")
    assert not widgets_scope.is_in_scope("https://example.com/about/")
    assert not widgets_scope.is_in_scope("https://example.com/")
    assert not widgets_scope.is_in_scope("https://other.com/x/")


def test_domain_scope(domain_scope):
    assert domain_scope.is_in_scope("https://example.com/products/widgets/item1/")
    assert domain_scope.is_in_scope("https://example.com/products/gadgets/item2/")
    assert domain_scope.is_in_scope("https://example.com/")
    assert not domain_scope.is_in_scope("https://other.com/x/")
    assert not domain_scope.is_in_scope("https://other.com/products/widgets/")


@pytest.mark.parametrize("mode", list(ScopeMode))
def test_origin_must_match(mode):
    scope = Scope.from_seed("https://example.com/", mode=mode)
    assert scope.is_in_scope("https://example.com/dir/subpage.html")
    assert not scope.is_in_scope("http://example.com/")
    assert not scope.is_in_scope("https://example.com:8443/")
    assert not scope.is_in_scope("https://sub.example.com/")


def test_seed_is_normalized_before_prefix():
    scope = Scope.from_seed("https://Example.com/docs/guide#intro")
    assert scope.seed_url == "https://example.com/docs/guide/"
    assert scope.seed_path_prefix == "/docs/guide/"


def test_file_seed_covers_its_directory():
    scope = Scope.from_seed("https://example.com/docs/index.html")
    assert scope.seed_path_prefix == "/docs/"
    assert scope.is_in_scope("https://example.com/docs/other.html")
    assert not scope.is_in_scope("https://example.com/blog/")


def test_seed_without_trailing_slash_policy():
    scope = Scope.from_seed("https://example.com/docs", add_trailing_slash=False)
    assert scope.seed_url == "https://example.com/docs"
    assert scope.seed_path_prefix == "/"


def test_mode_accepts_string():
    assert Scope.from_seed("https://example.com/", mode="domain").mode is ScopeMode.DOMAIN


def test_invalid_seed():
    with pytest.raises(InvalidURL):
        Scope.from_seed("not a url")


def test_skip_pattern():
    scope = Scope.from_seed("https://example.com/", skip_pattern=r"\.pdf$|/private/")
    assert scope.is_skipped("https://example.com/file.pdf")
    assert scope.is_skipped("https://example.com/private/x/")
    assert not scope.is_skipped("https://example.com/public/")
    assert not Scope.from_seed("https://example.com/").is_skipped("https://example.com/file.pdf")
