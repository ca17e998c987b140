# Command-line form: fill fields, generate, copy the letter out

import sys
from pathlib import Path

import click
from loguru import logger

from ..config import API_URL
from ..form.controller import ApiClient, ApiError, FormController
from ..form.storage import LocalStore
from ..llm.templates import TONE_PRESETS
from ..utils.logger import setup_logger

# option name -> camelCase form field
FIELD_OPTIONS = {
    "job_title": "jobTitle",
    "company": "companyName",
    "description": "jobDescription",
    "notes": "extraNotes",
    "name": "userName",
    "email": "email",
    "phone": "phone",
    "summary": "professionalSummary",
    "skills": "keySkills",
    "tone": "tone",
}


def _print_errors(errors):
    for field, message in errors.items():
        click.secho(f"  {field}: {message}", fg="red", err=True)


@click.group()
@click.option("--api-url", default=API_URL, envvar="COVERFORGE_API_URL", show_default=True)
@click.option("--verbose", is_flag=True, help="Debug logging")
@click.pass_context
def cli(ctx, api_url, verbose):
    """Generate tailored cover letters from the command line."""
    setup_logger("cli", level="DEBUG" if verbose else "WARNING")
    ctx.obj = FormController(LocalStore(), ApiClient(api_url))


@cli.command("set")
@click.option("--job-title")
@click.option("--company")
@click.option("--description", help="Job description text")
@click.option("--description-file", type=click.Path(exists=True, dir_okay=False),
              help="Read the job description from a file")
@click.option("--notes")
@click.option("--name")
@click.option("--email")
@click.option("--phone")
@click.option("--summary")
@click.option("--skills")
@click.option("--tone", type=click.Choice(list(TONE_PRESETS)))
@click.pass_obj
def set_fields(form, description_file, **options):
    """Update form fields. Values are saved between runs."""
    if description_file:
        options["description"] = Path(description_file).read_text(encoding="utf-8")
    updates = {FIELD_OPTIONS[k]: v for k, v in options.items() if v is not None}
    if not updates:
        raise click.UsageError("Nothing to set.")
    for field, value in updates.items():
        form.update_field(field, value)
    click.echo(f"Updated: {', '.join(updates)}")


@cli.command()
@click.pass_obj
def show(form):
    """Print the saved form and the last generated letter."""
    for field, value in form.data.to_dict().items():
        click.echo(f"{field:>20}: {value}")
    if form.letter:
        click.echo("\n" + form.letter)
        click.echo(f"\n{form.word_count} words, {form.char_count} characters")


@cli.command()
@click.pass_obj
def generate(form):
    """Validate the form and generate a cover letter."""
    try:
        letter = form.generate()
    except ApiError as e:
        click.secho(str(e), fg="red", err=True)
        sys.exit(1)
    if letter is None:
        click.secho("The form has errors:", fg="red", err=True)
        _print_errors(form.errors)
        sys.exit(2)
    click.echo(letter)
    click.echo(f"\n{form.word_count} words, {form.char_count} characters", err=True)


@cli.command()
@click.pass_obj
def retry(form):
    """Run the last generation again."""
    try:
        letter = form.retry()
    except ApiError as e:
        click.secho(str(e), fg="red", err=True)
        sys.exit(1)
    if letter is None:
        _print_errors(form.errors)
        sys.exit(2)
    click.echo(letter)


@cli.command("parse-resume")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.pass_obj
def parse_resume(form, path):
    """Upload a resume and fill the profile fields from it."""
    try:
        parsed = form.parse_resume(path)
    except ApiError as e:
        click.secho(str(e), fg="red", err=True)
        sys.exit(1)
    filled = [k for k, v in parsed.items() if v]
    logger.debug(f"[cli] Resume fields: {parsed}")
    click.echo(f"Filled from resume: {', '.join(filled) or 'nothing'}")


@cli.command()
@click.pass_obj
def clear(form):
    """Reset the form and forget the last letter."""
    form.clear()
    click.echo("Form cleared.")


@cli.command()
def tones():
    """List tone presets."""
    for name in TONE_PRESETS:
        click.echo(name)


def main():
    cli()

if __name__ == "__main__":
    main()
