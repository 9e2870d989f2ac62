"""Resource lookup commands (users, groups, apps)."""

import typer

from okta_client.cli.common import (
    TimeoutOption,
    console,
    render_model,
    render_response,
    run_async_command,
)
from okta_client.client import OktaClient

users_app = typer.Typer(help="Okta users")
groups_app = typer.Typer(help="Okta groups")
apps_app = typer.Typer(help="Okta applications")

USER_FIELDS = [
    "id",
    "status",
    "profile.login",
    "profile.email",
    "profile.first_name",
    "profile.last_name",
    "last_login",
]
GROUP_FIELDS = ["id", "type", "profile.name", "profile.description", "last_updated"]
APP_FIELDS = ["id", "name", "label", "status", "sign_on_mode", "last_updated"]


@users_app.command("get")
def get_user(
    user_id: str = typer.Argument(help="User id, login, or 'me'"),
    by_login: bool = typer.Option(False, "--login", "-l", help="Look the user up by login"),
    timeout: TimeoutOption = None,
) -> None:
    """Fetch a user.

    Examples:
        okta-client users get me
        okta-client users get jane@example.com --login
    """

    async def _get() -> None:
        async with OktaClient() as client:
            if by_login:
                user, response = await client.users.get_by_login(user_id, timeout=timeout)
            else:
                user, response = await client.users.get_by_id(user_id, timeout=timeout)
        if user is not None:
            console.print(render_model("User", user, USER_FIELDS))
        console.print(render_response(response))

    run_async_command(_get(), error_prefix="Failed to fetch user")


@groups_app.command("get")
def get_group(
    group_id: str = typer.Argument(help="Group id"),
    timeout: TimeoutOption = None,
) -> None:
    """Fetch a group by id."""

    async def _get() -> None:
        async with OktaClient() as client:
            group, response = await client.groups.get_by_id(group_id, timeout=timeout)
        if group is not None:
            console.print(render_model("Group", group, GROUP_FIELDS))
        console.print(render_response(response))

    run_async_command(_get(), error_prefix="Failed to fetch group")


@apps_app.command("get")
def get_app(
    app_id: str = typer.Argument(help="Application id"),
    timeout: TimeoutOption = None,
) -> None:
    """Fetch an application by id."""

    async def _get() -> None:
        async with OktaClient() as client:
            app, response = await client.apps.get_by_id(app_id, timeout=timeout)
        if app is not None:
            console.print(render_model("App", app, APP_FIELDS))
        console.print(render_response(response))

    run_async_command(_get(), error_prefix="Failed to fetch app")


@apps_app.command("add-bookmark")
def add_bookmark(
    label: str = typer.Argument(help="Label shown to users"),
    url: str = typer.Argument(help="URL the bookmark opens"),
    activate: bool = typer.Option(True, "--activate/--no-activate", help="Activate on creation"),
    timeout: TimeoutOption = None,
) -> None:
    """Create a bookmark application.

    Examples:
        okta-client apps add-bookmark "Wiki" https://wiki.example.com
    """

    async def _add() -> None:
        async with OktaClient() as client:
            app, response = await client.apps.add_bookmark_app(
                label, url, activate=activate, timeout=timeout
            )
        if app is not None:
            console.print(render_model("App", app, APP_FIELDS))
        console.print(render_response(response))

    run_async_command(_add(), error_prefix="Failed to create app")
