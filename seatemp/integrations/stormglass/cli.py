import click

from .client import StormglassClient, get_display_timezone


@click.group(name="stormglass", help="Query the Stormglass API")
def cli() -> None:
    pass


@cli.command(help="Fetch the last 24 hours of water temperatures")
@click.option("--indent", type=int, default=2, show_default=True)
async def fetch(*, indent: int) -> None:
    async with StormglassClient(display_timezone=get_display_timezone()) as client:
        reading = await client.fetch_window()

    click.echo(reading.model_dump_json(indent=indent))
