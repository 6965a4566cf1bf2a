"""fdpsync CLI - Main commands."""
import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TaskProgressColumn
from rich.table import Table

from fdpsync.core.api import APIConfig, FairOSClient
from fdpsync.core.crypto import PasswordCipher
from fdpsync.core.exceptions import FdpException
from fdpsync.core.upload import UploadDirectoryOptions, UploadOptions, UploadProgress
from fdpsync.directory import Directory

app = typer.Typer(
    name="fdpsync",
    help="Upload directories into FairOS-dfs pods",
    add_completion=False
)
console = Console()

API_URL_OPTION = typer.Option(
    "http://localhost:9090/", "--api-url", envvar="FDP_API_URL", help="FairOS-dfs gateway URL"
)
COOKIE_OPTION = typer.Option(
    None, "--cookie", envvar="FDP_COOKIE", help="Session cookie of a logged-in user"
)


def run_async(coro):
    """Run async function, reporting fdpsync errors."""
    try:
        return asyncio.run(coro)
    except FdpException as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


def make_client(api_url: str, cookie: str) -> FairOSClient:
    return FairOSClient(APIConfig(gateway=api_url), cookie=cookie)


@app.command()
def upload(
    pod: str = typer.Argument(..., help="Pod name"),
    source: Path = typer.Argument(..., help="Local directory to upload", exists=True, file_okay=False),
    recursive: bool = typer.Option(True, "--recursive/--no-recursive", help="Include subdirectories"),
    exclude_dot_files: bool = typer.Option(False, "--exclude-dot-files", help="Skip files starting with a dot"),
    root_name: bool = typer.Option(
        True, "--root-name/--no-root-name", help="Keep the directory's own name as the first remote segment"
    ),
    block_size: int = typer.Option(1_000_000, "--block-size", help="Block size in bytes"),
    api_url: str = API_URL_OPTION,
    cookie: str = COOKIE_OPTION,
):
    """Upload a local directory into a pod."""
    options = UploadDirectoryOptions(
        is_recursive=recursive,
        exclude_dot_files=exclude_dot_files,
        is_include_directory_name=root_name,
        upload_options=UploadOptions(block_size=block_size),
    )

    async def do_upload():
        async with make_client(api_url, cookie) as client:
            directory = Directory.from_client(client)

            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                BarColumn(),
                TaskProgressColumn(),
                console=console
            ) as progress:
                task = progress.add_task(f"Uploading {source.name}", total=100)

                def on_progress(p: UploadProgress):
                    progress.update(task, completed=p.percentage)

                result = await directory.upload(pod, source, options, progress_callback=on_progress)

        console.print(f"[green]Uploaded:[/green] {len(result.uploaded_files)} files ({result.uploaded_bytes:,} bytes)")
        console.print(
            f"Directories: {len(result.created_directories)} created, "
            f"{len(result.existing_directories)} already existed"
        )

    run_async(do_upload())


@app.command()
def mkdir(
    pod: str = typer.Argument(..., help="Pod name"),
    path: str = typer.Argument(..., help="Absolute directory path"),
    api_url: str = API_URL_OPTION,
    cookie: str = COOKIE_OPTION,
):
    """Create a directory."""
    async def do_mkdir():
        async with make_client(api_url, cookie) as client:
            await Directory.from_client(client).create(pod, path)
        console.print(f"[green]Created {path}[/green]")

    run_async(do_mkdir())


@app.command()
def rmdir(
    pod: str = typer.Argument(..., help="Pod name"),
    path: str = typer.Argument(..., help="Absolute directory path"),
    api_url: str = API_URL_OPTION,
    cookie: str = COOKIE_OPTION,
):
    """Delete a directory."""
    async def do_rmdir():
        async with make_client(api_url, cookie) as client:
            await Directory.from_client(client).delete(pod, path)
        console.print(f"[green]Deleted {path}[/green]")

    run_async(do_rmdir())


@app.command()
def ls(
    pod: str = typer.Argument(..., help="Pod name"),
    path: str = typer.Argument("/", help="Path to list"),
    recursive: bool = typer.Option(False, "-r", "--recursive", help="List subdirectories too"),
    api_url: str = API_URL_OPTION,
    cookie: str = COOKIE_OPTION,
):
    """List files and directories."""
    async def list_files():
        async with make_client(api_url, cookie) as client:
            item = await Directory.from_client(client).read(pod, path, recursive)

        table = Table()
        table.add_column("Type", style="cyan")
        table.add_column("Size", justify="right")
        table.add_column("Path")

        def add_rows(directory):
            for child in directory.directories:
                table.add_row("D", "-", child.path)
                add_rows(child)
            for file in directory.files:
                table.add_row("F", f"{file.size:,}", file.path)

        add_rows(item)
        console.print(table)

    run_async(list_files())


@app.command()
def encrypt(
    text: str = typer.Argument(..., help="Text to encrypt"),
    password: str = typer.Option(..., "--password", "-p", prompt=True, hide_input=True),
):
    """Encrypt text with a password."""
    typer.echo(PasswordCipher().encrypt(password, text))


@app.command()
def decrypt(
    envelope: str = typer.Argument(..., help="Base64 envelope"),
    password: str = typer.Option(..., "--password", "-p", prompt=True, hide_input=True),
):
    """Decrypt an envelope with a password."""
    try:
        typer.echo(PasswordCipher().decrypt(password, envelope))
    except FdpException as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
