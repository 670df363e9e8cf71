"""Command line entry point.

Examples:
    atlas-packer icons out/sprite
    atlas-packer icons out/sprite --scale 2 --padding 1
    atlas-packer icons out/sprite --heuristic bssf --extension .png --extension .gif
"""

import logging

import click

from .atlas import AtlasConfig, build_atlases
from .globs import DEFAULT_EXTENSIONS, LOG_FORMAT, MAX_ATLAS_SIDE
from .utils.packers import FreeRectChoiceHeuristic, PackingError

HEURISTIC_CHOICES = [h.code.lower() for h in FreeRectChoiceHeuristic]


@click.command()
@click.argument("source_path", type=click.Path(exists=True, file_okay=False))
@click.argument("destination_template")
@click.option("--scale", "-s", default=1, type=click.IntRange(min=1), show_default=True,
              help="Scale of pictures, 1 for 1x, 2 for 2x, 3 for 3x")
@click.option("--padding", "-p", default=0, type=click.IntRange(min=0), show_default=True,
              help="Count of clear pixels around every side of each picture")
@click.option("--heuristic", "-H", default="cp", type=click.Choice(HEURISTIC_CHOICES, case_sensitive=False),
              show_default=True, help="Placement rule of the packer")
@click.option("--max-side", default=MAX_ATLAS_SIDE, type=click.IntRange(min=1), show_default=True,
              help="Largest allowed atlas side")
@click.option("--extension", "-e", "extensions", multiple=True, default=DEFAULT_EXTENSIONS, show_default=True,
              help="Extension of source images, can be repeated")
@click.option("--verbose", "-v", is_flag=True, help="Print debug output")
def main(source_path: str, destination_template: str, scale: int, padding: int, heuristic: str,
         max_side: int, extensions: tuple, verbose: bool) -> None:
    """Pack the images in SOURCE_PATH into atlases at DESTINATION_TEMPLATE.

    Every atlas is written as a PNG and a JSON manifest named after the
    template, e.g. out/sprite@2x.png and out/sprite@2x.json.
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format=LOG_FORMAT)

    config = AtlasConfig(
        source_path=source_path,
        destination_template=destination_template,
        scale=scale,
        padding=padding,
        heuristic=FreeRectChoiceHeuristic.from_code(heuristic),
        max_side=max_side,
        extensions=tuple(extensions),
    )
    try:
        stems = build_atlases(config)
    except PackingError as e:
        raise click.ClickException(str(e)) from e

    click.echo("Wrote {} atlas(es), check results at {}*".format(len(stems), destination_template))
