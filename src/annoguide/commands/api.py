"""Commands: fetch users and posts from the API."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from annoguide.commands._base import AppCommand

if TYPE_CHECKING:
    from annoguide.commands._context import AppContext


@click.command(
    "get-user",
    cls=AppCommand,
    examples="""\
  annoguide get-user
  annoguide get-user --id 3
  annoguide --json get-user --id 1""",
)
@click.option("--id", "user_id", type=int, default=None, help="User id (default: [api] user_id).")
@click.pass_obj
def get_user(app: AppContext, user_id: int | None) -> None:
    """Fetch a user and validate its constrained fields."""
    from annoguide.services.api import ApiService

    app.emit(ApiService(app.settings, app.client).get_user(user_id))


@click.command(
    "get-post",
    cls=AppCommand,
    examples="""\
  annoguide get-post
  annoguide get-post --id 7""",
)
@click.option("--id", "post_id", type=int, default=None, help="Post id (default: [api] post_id).")
@click.pass_obj
def get_post(app: AppContext, post_id: int | None) -> None:
    """Fetch a post (sent with the bearer token, if configured)."""
    from annoguide.services.api import ApiService

    app.emit(ApiService(app.settings, app.client).get_post(post_id))


@click.command(
    cls=AppCommand,
    examples="""\
  annoguide demo
  annoguide -v demo --user-id 5 --post-id 2""",
)
@click.option("--user-id", type=int, default=None, help="User id to fetch.")
@click.option("--post-id", type=int, default=None, help="Post id to fetch.")
@click.pass_obj
def demo(app: AppContext, user_id: int | None, post_id: int | None) -> None:
    """Fetch a post and then a user, printing both."""
    from annoguide.services.api import ApiService

    app.emit(ApiService(app.settings, app.client).demo(user_id=user_id, post_id=post_id))
