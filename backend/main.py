"""
PDF Chat session client.

Drives the gateway's auth routes from a terminal, the way the web client
does: the session lives in a cookie the client never reads. Cookies are
kept in a small file between invocations.
"""

import argparse
import asyncio
import getpass
import json
import sys
from pathlib import Path

import httpx

from modules.session import (
    AccountClient,
    AuthRequestError,
    AuthStore,
    register_account,
    user_message,
)
from shared.config import get_settings
from shared.log import configure_logging, console

DEFAULT_COOKIE_FILE = Path.home() / ".pdfchat" / "cookies.json"


def load_cookies(client: httpx.AsyncClient, path: Path) -> None:
    """Restore cookies saved by a previous run; an unreadable file is ignored."""
    if not path.exists():
        return
    try:
        cookies = json.loads(path.read_text())
        for cookie in cookies:
            client.cookies.set(cookie["name"], cookie["value"], domain=cookie["domain"], path=cookie["path"])
    except (ValueError, KeyError, TypeError) as e:
        console.print(f"[yellow]Ignoring unreadable cookie file {path}:[/yellow] {e}")
        client.cookies.clear()


def save_cookies(client: httpx.AsyncClient, path: Path) -> None:
    """Persist the client's cookies; an empty jar removes the file."""
    cookies = [
        {"name": c.name, "value": c.value, "domain": c.domain, "path": c.path}
        for c in client.cookies.jar
    ]
    if not cookies:
        path.unlink(missing_ok=True)
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(cookies))
    path.chmod(0o600)


def print_user(store: AuthStore) -> None:
    user = store.state.user
    if user is None:
        console.print("[yellow]Not logged in[/yellow]")
        return
    console.print(f"[bold]{user.username}[/bold] <{user.email}>")
    console.print(f"[dim]id: {user.id}[/dim]")


async def run_command(args: argparse.Namespace, store: AuthStore) -> None:
    """Run one CLI command against an initialized store."""
    if args.command == "login":
        password = args.password or getpass.getpass("Password: ")
        await store.login(args.email, password)
        console.print("[green]Logged in[/green]")
        print_user(store)

    elif args.command == "signup":
        password = args.password or getpass.getpass("Password: ")
        result = await register_account(
            store,
            args.username,
            args.email,
            password,
            first_name=args.first_name,
            last_name=args.last_name,
        )
        console.print("[green]Account created[/green]")
        if result.profile_error:
            console.print(f"[yellow]Profile not saved:[/yellow] {result.profile_error}")
        print_user(store)

    elif args.command == "whoami":
        print_user(store)

    elif args.command == "refresh":
        await store.refresh_session()
        console.print("[green]Session refreshed[/green]")

    elif args.command == "logout":
        await store.logout()
        console.print("[green]Logged out[/green]")

    elif args.command == "change-password":
        current = getpass.getpass("Current password: ")
        new = getpass.getpass("New password: ")
        result = await AccountClient(store).change_password(current, new)
        console.print(f"[green]{result.get('message', 'Password changed')}[/green]")

    elif args.command == "forgot-password":
        result = await AccountClient(store).request_password_reset(args.email)
        console.print(result.get("message", "Check your email for a reset link"))


async def main(args: argparse.Namespace) -> int:
    """Main entry point.

    Returns:
        Process exit code
    """
    async with AuthStore.connect(gateway_url=args.gateway) as store:
        load_cookies(store.client, args.cookie_file)
        await store.initialize()

        try:
            await run_command(args, store)
        except AuthRequestError as e:
            console.print(f"[red]Error:[/red] {e.message}")
            console.print(f"[dim]{user_message(e.kind)}[/dim]")
            return 1
        finally:
            save_cookies(store.client, args.cookie_file)

    return 0


if __name__ == "__main__":
    settings = get_settings()

    parser = argparse.ArgumentParser(description="PDF Chat session client")
    parser.add_argument(
        "--gateway",
        default=settings.gateway_url,
        help=f"Gateway base URL (default: {settings.gateway_url})",
    )
    parser.add_argument(
        "--cookie-file",
        type=Path,
        default=DEFAULT_COOKIE_FILE,
        help="Where the session cookie is kept between runs",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    commands = parser.add_subparsers(dest="command", required=True)

    login_parser = commands.add_parser("login", help="Log in with email and password")
    login_parser.add_argument("email")
    login_parser.add_argument("--password", help="Prompted for when omitted")

    signup_parser = commands.add_parser("signup", help="Create an account")
    signup_parser.add_argument("username")
    signup_parser.add_argument("email")
    signup_parser.add_argument("--password", help="Prompted for when omitted")
    signup_parser.add_argument("--first-name", default="")
    signup_parser.add_argument("--last-name", default="")

    commands.add_parser("whoami", help="Show the logged-in user")
    commands.add_parser("refresh", help="Renew the session")
    commands.add_parser("logout", help="End the session")
    commands.add_parser("change-password", help="Change your password")

    forgot_parser = commands.add_parser("forgot-password", help="Request a reset email")
    forgot_parser.add_argument("email")

    args = parser.parse_args()
    configure_logging(args.log_level)
    sys.exit(asyncio.run(main(args)))
