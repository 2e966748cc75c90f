"""Click CLI for glossa: detect, batch, languages."""

import json
import sys
from pathlib import Path

import click

from glossa.exceptions import GlossaError
from glossa.log import get_logger, setup_logging

logger = get_logger(__name__)

_METHODS = ['trigram', 'alphabet']


def _build_options(allow, deny, method):
    from glossa.models import DetectionOptions
    return DetectionOptions.from_codes(allow=allow, deny=deny, method=method)


def _filter_options(func):
    func = click.option('--method', '-m', default='trigram', type=click.Choice(_METHODS),
                        help='Scoring method (alphabet applies to Cyrillic text).')(func)
    func = click.option('--deny', '-d', multiple=True, metavar='CODE',
                        help='Never report this ISO 639-3 language code. Repeatable.')(func)
    func = click.option('--allow', '-a', multiple=True, metavar='CODE',
                        help='Only consider this ISO 639-3 language code. Repeatable.')(func)
    return func


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging.')
@click.option('--log-file', default=None, type=click.Path(dir_okay=False),
              help='Also write log records to this file.')
def cli(verbose, log_file):
    """glossa: language identification with calibrated confidence."""
    setup_logging('DEBUG' if verbose else 'WARNING', log_file=log_file)


@cli.command()
@click.argument('text')
@_filter_options
@click.option('--json', 'as_json', is_flag=True, help='Print the result as JSON.')
def detect(text, allow, deny, method, as_json):
    """Detect the language of TEXT."""
    from glossa.detector import LanguageDetector

    try:
        detector = LanguageDetector(_build_options(allow, deny, method))
        info = detector.detect(text)
    except GlossaError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(info.to_dict() if info else None, ensure_ascii=False))
        return
    if info is None:
        click.echo("No language detected")
        return

    reliability = 'reliable' if info.is_reliable() else 'unreliable'
    click.echo(f"Language:   {info.lang.eng_name} ({info.lang.code})")
    click.echo(f"Script:     {info.script.value}")
    click.echo(f"Confidence: {info.confidence:.3f} ({reliability})")


@cli.command()
@click.argument('text_file', type=click.Path(exists=True, dir_okay=False))
@_filter_options
@click.option('--output', '-o', default=None, type=click.Path(dir_okay=False),
              help='Output JSON lines file.')
def batch(text_file, allow, deny, method, output):
    """Detect the language of every non-empty line of TEXT_FILE."""
    from glossa.detector import LanguageDetector
    from glossa.progress import ProgressTracker

    src = Path(text_file)
    out_path = Path(output) if output else src.with_name(f'{src.stem}.langs.jsonl')

    try:
        detector = LanguageDetector(_build_options(allow, deny, method))
        lines = [line.strip() for line in src.read_text(encoding='utf-8').splitlines()]
        lines = [line for line in lines if line]

        detected = 0
        tracker = ProgressTracker(total=len(lines))
        with tracker.track(f"Detecting {src.name}"), open(out_path, 'w', encoding='utf-8') as f:
            for line in lines:
                info = detector.detect(line)
                record = {'text': line, 'result': info.to_dict() if info else None}
                f.write(json.dumps(record, ensure_ascii=False) + '\n')
                if info:
                    detected += 1
                tracker.advance()
    except GlossaError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)
    except UnicodeDecodeError as e:
        click.echo(f"Error: {src} is not valid UTF-8 ({e.reason})", err=True)
        sys.exit(1)

    logger.debug("Wrote %d records to %s", len(lines), out_path)
    click.echo(f"Detected {detected}/{len(lines)} lines -> {out_path}")


@cli.command()
def languages():
    """List supported languages grouped by script."""
    from glossa.script import Script, script_languages
    from glossa.trigrams import has_profile

    for script in Script:
        click.echo(f"{script.value}:")
        for lang in script_languages(script):
            marker = ' (trigram profile)' if has_profile(lang) else ''
            click.echo(f"  {lang.code}  {lang.eng_name}{marker}")

