import pytest

from revql.config import ColorConfig
from revql.formatting import colorize, format_path, path_to_dict, render_path, visible_hops
from revql.schema import Type
from revql.search import PathResult, TypeField, search_by_type


@pytest.fixture
def relay_post_result(relay_types: dict[str, Type]) -> PathResult:
    results = search_by_type("Post", containing=False, show_relay=False, type_map=relay_types)
    return results[1]


def test_format_blog_path(blog_types: dict[str, Type]) -> None:
    result = PathResult(
        root="Query",
        target=TypeField("Post"),
        hops=[TypeField("Query", "user"), TypeField("User", "posts")],
    )
    assert format_path(result, blog_types) == "Post: Query.user -> User.posts"


def test_format_field_target(blog_types: dict[str, Type]) -> None:
    result = PathResult(root="Query", target=TypeField("Post", "author"), hops=[TypeField("Query", "user")])
    assert format_path(result, blog_types) == "Post.author: Query.user"


def test_format_bare_type_hop(blog_types: dict[str, Type]) -> None:
    result = PathResult(root="Query", target=TypeField("User"), hops=[TypeField("Query", "user"), TypeField("User")])
    assert format_path(result, blog_types) == "User: Query.user -> User"


def test_relay_hops_elided(relay_post_result: PathResult, relay_types: dict[str, Type]) -> None:
    assert format_path(relay_post_result, relay_types) == "Post: Query.users -> User.posts"


def test_relay_hops_shown(relay_post_result: PathResult, relay_types: dict[str, Type]) -> None:
    assert (
        format_path(relay_post_result, relay_types, show_relay=True)
        == "Post: Query.users -> UserConnection.edges -> UserEdge.node -> User.posts"
    )


def test_visible_hops_unknown_type_is_kept(relay_types: dict[str, Type]) -> None:
    hops = [TypeField("Ghost", "boo"), TypeField("PageInfo", "hasNextPage")]
    assert visible_hops(hops, relay_types, show_relay=False) == [TypeField("Ghost", "boo")]
    assert visible_hops(hops, relay_types, show_relay=True) == hops


def test_colorize() -> None:
    assert colorize(TypeField("User", "posts"), "green", "white") == "[green]User[/green].[white]posts[/white]"
    assert colorize(TypeField("User"), "green", "white") == "[green]User[/green]"


def test_render_path_default_colors(relay_post_result: PathResult, relay_types: dict[str, Type]) -> None:
    assert render_path(relay_post_result, relay_types) == (
        "[red]Post[/red]: [green]Query[/green].[white]users[/white] -> [green]User[/green].[white]posts[/white]"
    )


def test_render_path_custom_colors(blog_types: dict[str, Type]) -> None:
    result = PathResult(root="Query", target=TypeField("Post", "author"), hops=[TypeField("Query", "user")])
    colors = ColorConfig(target="bold red", type="cyan", field="yellow")
    assert render_path(result, blog_types, colors=colors) == (
        "[bold red]Post[/bold red].[bold red]author[/bold red]: [cyan]Query[/cyan].[yellow]user[/yellow]"
    )


def test_path_to_dict(relay_post_result: PathResult, relay_types: dict[str, Type]) -> None:
    assert path_to_dict(relay_post_result, relay_types) == {
        "root": "Query",
        "target": "Post",
        "path": ["Query.users", "User.posts"],
        "relay_hidden": 2,
    }
    assert path_to_dict(relay_post_result, relay_types, show_relay=True)["relay_hidden"] == 0
