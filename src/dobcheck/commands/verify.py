"""Command group: age verification with one of three evaluators.

Every value can be given as an option. Missing ones are prompted for
(one at a time, re-asking until the guard accepts the input); with
``--no-interact`` they fall back to the ``[verify]`` config defaults.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import click

from dobcheck.commands._base import DobGroup
from dobcheck.domain.age import EvaluationMode
from dobcheck.domain.validation import validate
from dobcheck.services.verify import VerificationService

if TYPE_CHECKING:
    from dobcheck.commands._context import AppContext

_GUARD_MESSAGES: dict[str, str] = {
    "date": "Expected a date formatted as YYYY-MM-DD.",
    "time": "Expected a time formatted as HH:MM or HH:MM:SS.",
    "timezone": "Expected an IANA time zone id such as Europe/Zurich.",
    "age": "Expected a positive number of years.",
}

_MODE_HELP: dict[str, str] = {
    EvaluationMode.DATE: "Simple field arithmetic on plain dates.",
    EvaluationMode.CALENDAR: "Calendar-correct comparison (Feb 29 constrains to Feb 28).",
    EvaluationMode.LOCATION: "Location-aware comparison of absolute instants.",
}


def _guard(kind: str) -> Callable[[str], str]:
    """Return a converter that strips and checks a raw string, or raises BadParameter."""

    def check(value: str) -> str:
        value = str(value).strip()
        if not validate(kind, value):
            raise click.BadParameter(_GUARD_MESSAGES[kind])
        return value

    return check


def _option_guard(kind: str) -> Callable[[click.Context, click.Parameter, Any], Any]:
    check = _guard(kind)

    def callback(ctx: click.Context, param: click.Parameter, value: Any) -> Any:
        return None if value is None else check(value)

    return callback


def _collect(app: AppContext, value: str | None, prompt: str, default: Any, kind: str) -> str:
    """Use *value* if given, else prompt (interactive) or take *default*."""
    if value is not None:
        return value
    if not app.interactive:
        return str(default)
    return click.prompt(prompt, default=str(default), value_proc=_guard(kind))


def _minimum_age(app: AppContext, value: str | None) -> float:
    cfg = app.settings.verify
    return float(_collect(app, value, "Minimum required age", f"{cfg.minimum_age:g}", "age"))


def _date_options(func: Callable[..., Any]) -> Callable[..., Any]:
    func = click.option(
        "--min-age", default=None, callback=_option_guard("age"), help="Minimum required age."
    )(func)
    func = click.option(
        "--born", default=None, callback=_option_guard("date"), help="Birth date (YYYY-MM-DD)."
    )(func)
    func = click.option(
        "--on",
        "on_date",
        default=None,
        callback=_option_guard("date"),
        help="Verification date (YYYY-MM-DD).",
    )(func)
    return func


def _run_dates(
    app: AppContext,
    mode: EvaluationMode,
    on_date: str | None,
    born: str | None,
    min_age: str | None,
) -> None:
    cfg = app.settings.verify
    reference = _collect(
        app, on_date, "Verification date (YYYY-MM-DD)", cfg.reference_date, "date"
    )
    birth = _collect(app, born, "Birth date (YYYY-MM-DD)", cfg.birth_date, "date")
    minimum_age = _minimum_age(app, min_age)
    app.emit(
        VerificationService(app.settings).verify_dates(reference, birth, minimum_age, mode=mode)
    )


_VERIFY_EXAMPLES = """\
  dobcheck verify
  dobcheck verify date --on 2023-02-28 --born 2004-02-29 --min-age 19
  dobcheck verify calendar --on 2025-02-28 --born 2004-02-29
  dobcheck verify location --on 2021-02-28 --at 23:59 --zone Europe/Zurich \\
      --born 2000-02-29 --birthplace Europe/Zurich --min-age 21 --force-march-1
  dobcheck --no-interact --json verify location"""


@click.group(cls=DobGroup, invoke_without_command=True, examples=_VERIFY_EXAMPLES)
@click.pass_context
def verify(ctx: click.Context) -> None:
    """Check whether a person has reached a minimum age.

    Without a subcommand, asks which evaluation model to use.
    """
    if ctx.invoked_subcommand is not None:
        return
    app: AppContext = ctx.obj
    if not app.interactive:
        click.echo(ctx.get_help())
        return
    for mode, text in _MODE_HELP.items():
        click.echo(f"  {mode:<9} {text}")
    choice = click.prompt(
        "Select age verification model",
        type=click.Choice([str(m) for m in EvaluationMode]),
        default=str(EvaluationMode.CALENDAR),
    )
    command = {"date": date_cmd, "calendar": calendar_model, "location": location}[choice]
    ctx.invoke(command)


@verify.command(
    "date",
    examples="""\
  dobcheck verify date --on 2023-02-28 --born 2004-02-29 --min-age 19
  dobcheck -q verify date --on 2000-01-01 --born 2010-01-01""",
)
@_date_options
@click.pass_obj
def date_cmd(app: AppContext, on_date: str | None, born: str | None, min_age: str | None) -> None:
    """Naive year/month/day field arithmetic (no time, no zone)."""
    _run_dates(app, EvaluationMode.DATE, on_date, born, min_age)


@verify.command(
    "calendar",
    examples="""\
  dobcheck verify calendar --on 2023-02-28 --born 2004-02-29 --min-age 19
  dobcheck --json verify calendar --on 2025-02-28 --born 2004-02-29""",
)
@_date_options
@click.pass_obj
def calendar_model(
    app: AppContext, on_date: str | None, born: str | None, min_age: str | None
) -> None:
    """Calendar-correct check against the birthday in the verification year."""
    _run_dates(app, EvaluationMode.CALENDAR, on_date, born, min_age)


@verify.command(
    examples="""\
  dobcheck verify location --on 2025-02-28 --at 06:00 --zone Europe/Zurich \\
      --born 2004-02-29 --birthplace America/New_York --min-age 21
  dobcheck verify location --on 2021-02-28 --at 23:59 --zone Europe/Zurich \\
      --born 2000-02-29 --birthplace Europe/Zurich --min-age 21 --force-march-1""",
)
@click.option(
    "--zone", default=None, callback=_option_guard("timezone"), help="Verification zone."
)
@click.option(
    "--on", "on_date", default=None, callback=_option_guard("date"), help="Verification date."
)
@click.option(
    "--at", "at_time", default=None, callback=_option_guard("time"), help="Verification time."
)
@click.option(
    "--birthplace", default=None, callback=_option_guard("timezone"), help="Birthplace zone."
)
@click.option("--born", default=None, callback=_option_guard("date"), help="Birth date.")
@click.option(
    "--born-at", default=None, callback=_option_guard("time"), help="Birth time (default 00:00)."
)
@click.option("--min-age", default=None, callback=_option_guard("age"), help="Minimum age.")
@click.option(
    "--force-march-1/--no-force-march-1",
    default=None,
    help="Treat Feb 29 birthdays as March 1st in non-leap verification years.",
)
@click.pass_obj
def location(
    app: AppContext,
    zone: str | None,
    on_date: str | None,
    at_time: str | None,
    birthplace: str | None,
    born: str | None,
    born_at: str | None,
    min_age: str | None,
    force_march_1: bool | None,
) -> None:
    """Compare absolute instants anchored to different zones."""
    cfg = app.settings.verify
    zone = _collect(
        app, zone, "Verification time zone ID (IANA format)", cfg.reference_zone, "timezone"
    )
    on_date = _collect(app, on_date, "Verification date (YYYY-MM-DD)", cfg.reference_date, "date")
    at_time = _collect(
        app, at_time, "Verification time (hh:mm:ss, or hh:mm)", cfg.reference_time, "time"
    )
    birthplace = _collect(app, birthplace, "Birthplace time zone ID", cfg.birthplace, "timezone")
    born = _collect(app, born, "Birth date (YYYY-MM-DD)", cfg.birth_date, "date")
    born_at = born_at or cfg.birth_time
    minimum_age = _minimum_age(app, min_age)
    if force_march_1 is None:
        force_march_1 = (
            click.confirm(
                "Force leap year birthdays to March 1st?", default=cfg.force_march_1
            )
            if app.interactive
            else cfg.force_march_1
        )

    app.emit(
        VerificationService(app.settings).verify_location(
            reference_date=on_date,
            reference_time=at_time,
            reference_zone=zone,
            birth_date=born,
            birth_time=born_at,
            birthplace=birthplace,
            minimum_age=minimum_age,
            force_march_1=force_march_1,
        )
    )
