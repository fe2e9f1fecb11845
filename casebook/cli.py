"""
`flask quiz ...` commands for working with Quiz DSL files outside the admin UI.
"""
import json

import click
from flask import current_app
from flask.cli import AppGroup

from casebook.quiz import encode_document, parse_document
from casebook.quiz.errors import QuizSyntaxError
from casebook.quiz.schemas import steps_to_flag_records
from casebook.quiz.validation import validate_document

quiz_cli = AppGroup('quiz', help='Parse, format and check Quiz DSL text files.')


@quiz_cli.command('parse')
@click.argument('source', type=click.File('r', encoding='utf-8'))
@click.option('--strict', is_flag=True, help='Fail on lines without a marker.')
def parse_command(source, strict):
    """Print the parsed steps as JSON."""
    try:
        steps = parse_document(source.read(), strict=strict)
    except QuizSyntaxError as e:
        raise click.ClickException(str(e))
    click.echo(json.dumps(steps_to_flag_records(steps), ensure_ascii=False, indent=2))


@quiz_cli.command('format')
@click.argument('source', type=click.File('r', encoding='utf-8'))
def format_command(source):
    """Print the canonical form of a quiz text."""
    click.echo(encode_document(parse_document(source.read())))


@quiz_cli.command('check')
@click.argument('source', type=click.File('r', encoding='utf-8'))
def check_command(source):
    """Report rule violations; exit code 1 when there are any."""
    steps = parse_document(source.read())
    issues = validate_document(
        steps,
        min_options=current_app.config.get('QUIZ_MIN_OPTIONS', 2),
        require_single_correct=current_app.config.get('QUIZ_REQUIRE_SINGLE_CORRECT', True),
    )
    for issue in issues:
        click.echo(f"{issue.code}: {issue.message}", err=True)
    if issues:
        raise SystemExit(1)
    click.echo(f"OK: {len(steps)} steps")
