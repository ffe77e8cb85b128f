"""
CLI interface for the Public Records Request Toolkit.

Commands:
    due-date        — Compute the statutory response deadline
    estimate        — Estimate request fees
    letter          — Generate a request letter (optionally save it as a draft)
    list-states     — Show statutes and response periods
    list-templates  — Show record categories and the fields they use
    track           — Create, view, and update tracked requests
    stats           — Show request statistics
    follow-up       — Generate a follow-up letter for an overdue request
    appeal          — Generate an administrative appeal letter
"""

from __future__ import annotations

import json
from datetime import date, datetime
from pathlib import Path
from typing import Optional

import click

from records_toolkit import __version__
from records_toolkit.data.templates import RecordCategory
from records_toolkit.letters.appeals import AppealReason
from records_toolkit.tracker.models import DocumentType, NoteChannel, RequestStatus

_CATEGORY_CHOICE = click.Choice([c.value for c in RecordCategory], case_sensitive=False)
# OVERDUE is derived at read time and never stored.
_STATUS_CHOICE = click.Choice(
    [s.value for s in RequestStatus if s is not RequestStatus.OVERDUE], case_sensitive=False
)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------

@click.group()
@click.version_option(version=__version__, prog_name="records-toolkit")
@click.option("--config", "config_path", default=None, help="Path to a JSON config file.")
@click.option("--db", default=None, help="Database URL for the request tracker.")
@click.option("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ERROR).")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Optional[str],
    db: Optional[str],
    log_level: Optional[str],
) -> None:
    """Public Records Request Toolkit — draft, estimate, and track public records requests."""
    from records_toolkit.config import load_config
    from records_toolkit.logging_utils import configure_logging

    try:
        config = load_config(config_path)
    except (FileNotFoundError, json.JSONDecodeError) as exc:
        raise click.UsageError(f"Could not load config: {exc}")
    if db:
        config.db_url = db
    if log_level:
        config.log_level = log_level
    configure_logging(config.log_level, config.log_file)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config


def _get_store(ctx: click.Context):
    from records_toolkit.tracker.store import RequestStore, SQLBlobStore

    if "store" not in ctx.obj:
        config = ctx.obj["config"]
        ctx.obj["store"] = RequestStore(SQLBlobStore(config.db_url), key=config.storage_key)
    return ctx.obj["store"]


# ---------------------------------------------------------------------------
# due-date
# ---------------------------------------------------------------------------

@cli.command(name="due-date")
@click.option("--state", "-s", required=True, help="State code or name (e.g. CA, Texas).")
@click.option("--submitted", default=None, help="Submission date (YYYY-MM-DD, default: today).")
def due_date(state: str, submitted: Optional[str]) -> None:
    """Compute the statutory response deadline."""
    from records_toolkit.data.jurisdictions import get_profile, normalize_code
    from records_toolkit.money import format_date
    from records_toolkit.tracker.deadlines import compute_due_date, days_until_due

    code = normalize_code(state)
    profile = get_profile(code)
    if profile is None:
        click.echo(f"Unknown state '{state}'. No statutory deadline applies.")
        return

    submitted_on = _parse_date(submitted) if submitted else date.today()
    due = compute_due_date(code, submitted_on)

    click.echo(f"State:          {profile.name} ({profile.code})")
    click.echo(f"Statute:        {profile.statute}")
    click.echo(f"Response time:  {profile.display_time}")
    click.echo(f"Submitted:      {format_date(submitted_on)}")
    click.echo(f"Due:            {format_date(due)}")
    click.echo(f"Days remaining: {days_until_due(due)}")


# ---------------------------------------------------------------------------
# estimate
# ---------------------------------------------------------------------------

@cli.command()
@click.option("--state", "-s", default="", help="State code (blank for federal/other).")
@click.option("--type", "record_type", default="general", type=_CATEGORY_CHOICE,
              help="Record category.")
@click.option("--pages", default=0.0, type=float, help="Estimated pages.")
@click.option("--audio-minutes", default=0.0, type=float, help="Estimated audio/video minutes.")
@click.option("--search-hours", default=0.0, type=float, help="Estimated search hours.")
@click.option("--json-output", is_flag=True, help="Output as JSON instead of plain text.")
def estimate(
    state: str,
    record_type: str,
    pages: float,
    audio_minutes: float,
    search_hours: float,
    json_output: bool,
) -> None:
    """Estimate the fees for a request."""
    from records_toolkit.data.jurisdictions import normalize_code
    from records_toolkit.tracker.fees import estimate_fees

    result = estimate_fees(
        normalize_code(state),
        record_type.lower(),
        pages=pages,
        audio_minutes=audio_minutes,
        search_hours=search_hours,
    )
    if json_output:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return
    for line in result.breakdown_lines():
        click.echo(line)


# ---------------------------------------------------------------------------
# letter
# ---------------------------------------------------------------------------

@cli.command()
@click.option("--type", "record_type", default="general", type=_CATEGORY_CHOICE,
              help="Record category.")
@click.option("--state", "-s", default="", help="State code (blank for federal/other).")
@click.option("--agency", "-a", default="", help="Agency name.")
@click.option("--field", "-f", "field_values", multiple=True,
              help="Template field as key=value (repeatable). See list-templates.")
@click.option("--pages", default=0.0, type=float, help="Estimated pages.")
@click.option("--audio-minutes", default=0.0, type=float, help="Estimated audio/video minutes.")
@click.option("--search-hours", default=0.0, type=float, help="Estimated search hours.")
@click.option("--save", is_flag=True, help="Save the letter as a draft tracked request.")
@click.option("--title", default=None, help="Title for the saved request.")
@click.option("--output", "-o", default=None, help="Output file path (default: stdout).")
@click.pass_context
def letter(
    ctx: click.Context,
    record_type: str,
    state: str,
    agency: str,
    field_values: tuple[str, ...],
    pages: float,
    audio_minutes: float,
    search_hours: float,
    save: bool,
    title: Optional[str],
    output: Optional[str],
) -> None:
    """Generate a public records request letter."""
    from records_toolkit.data.jurisdictions import normalize_code
    from records_toolkit.letters.request_letter import RequestLetterBuilder
    from records_toolkit.tracker.fees import estimate_fees
    from records_toolkit.tracker.models import RequestRecord

    code = normalize_code(state)
    fields = _parse_fields(field_values)
    fees = estimate_fees(code, record_type.lower(), pages, audio_minutes, search_hours)
    generated = RequestLetterBuilder().build(
        record_type.lower(), fields, agency=agency, state=code, fee_total=fees.total
    )

    _emit(generated.text, output)

    if save:
        from records_toolkit.data.templates import get_record_template

        template = get_record_template(generated.record_type)
        record = RequestRecord.create(
            title=title or f"{template.name} - {agency}",
            record_type=generated.record_type,
            agency=agency,
            state=generated.state,
            description=fields.get("description", template.description),
            generated_text=generated.text,
            estimated_cost=fees.total,
            estimated_pages=int(pages),
        )
        _get_store(ctx).upsert(record)
        click.echo(f"Saved as request {record.id}", err=True)


# ---------------------------------------------------------------------------
# list-states / list-templates
# ---------------------------------------------------------------------------

@cli.command(name="list-states")
def list_states() -> None:
    """List state public records statutes and response periods."""
    from records_toolkit.data.jurisdictions import PUBLIC_RECORDS, list_jurisdictions

    for code in list_jurisdictions():
        profile = PUBLIC_RECORDS[code]
        click.echo(f"  {code}  {profile.name}")
        click.echo(f"      Statute:  {profile.statute}")
        click.echo(f"      Response: {profile.display_time}")


@cli.command(name="list-templates")
@click.option("--type", "record_type", default=None, type=_CATEGORY_CHOICE,
              help="Show details for one category.")
def list_templates(record_type: Optional[str]) -> None:
    """List record categories and the fields each template uses."""
    from records_toolkit.data.templates import all_record_templates, get_record_template

    if record_type:
        t = get_record_template(record_type.lower())
        click.echo(f"{t.name} ({t.category.value})")
        click.echo(f"  {t.description}")
        click.echo(f"  Fields: {', '.join(t.key_fields)}")
        click.echo(f"  Typical fees: {t.fee_estimate}")
        click.echo("  Tips:")
        for tip in t.tips:
            click.echo(f"    - {tip}")
        return

    for t in all_record_templates():
        click.echo(f"  {t.category.value:20s} {t.name}")
        click.echo(f"  {'':20s} fields: {', '.join(t.key_fields)}")


# ---------------------------------------------------------------------------
# track
# ---------------------------------------------------------------------------

@cli.group()
def track() -> None:
    """Create, view, and update tracked requests."""


@track.command(name="add")
@click.option("--title", "-t", required=True, help="Short title for the request.")
@click.option("--type", "record_type", default="general", type=_CATEGORY_CHOICE,
              help="Record category.")
@click.option("--agency", "-a", default="", help="Agency name.")
@click.option("--state", "-s", default="", help="State code (blank for federal/other).")
@click.option("--description", "-d", default="", help="Description of the records sought.")
@click.option("--letter-file", default=None, help="Path to the letter text to attach.")
@click.option("--estimated-cost", default=None, type=float, help="Estimated cost.")
@click.option("--estimated-pages", default=None, type=int, help="Estimated page count.")
@click.pass_context
def track_add(
    ctx: click.Context,
    title: str,
    record_type: str,
    agency: str,
    state: str,
    description: str,
    letter_file: Optional[str],
    estimated_cost: Optional[float],
    estimated_pages: Optional[int],
) -> None:
    """Add a new draft request."""
    from records_toolkit.data.jurisdictions import normalize_code
    from records_toolkit.tracker.models import RequestRecord

    record = RequestRecord.create(
        title=title,
        record_type=RecordCategory(record_type.lower()),
        agency=agency,
        state=normalize_code(state),
        description=description,
        generated_text=Path(letter_file).read_text(encoding="utf-8") if letter_file else "",
        estimated_cost=estimated_cost,
        estimated_pages=estimated_pages,
    )
    _get_store(ctx).upsert(record)
    click.echo(f"Tracked as request {record.id}")


@track.command(name="list")
@click.option("--status", default=None, type=click.Choice([s.value for s in RequestStatus]),
              help="Only show requests with this status (overdue is derived).")
@click.pass_context
def track_list(ctx: click.Context, status: Optional[str]) -> None:
    """List tracked requests."""
    from records_toolkit.tracker.deadlines import days_until_due, display_status

    records = _get_store(ctx).load()
    if status:
        records = [r for r in records if display_status(r).value == status]
    if not records:
        click.echo("No tracked requests.")
        return

    click.echo(f"Tracked requests ({len(records)}):")
    for req in records:
        days_str = f"{days_until_due(req.due_date)}d" if req.due_date else "N/A"
        click.echo(
            f"  {req.id} | {req.state or '--':2s} | {req.title[:35]:35s} | "
            f"{display_status(req).value:12s} | deadline: {days_str}"
        )


@track.command(name="show")
@click.argument("request_id")
@click.pass_context
def track_show(ctx: click.Context, request_id: str) -> None:
    """Show details for a request."""
    from records_toolkit.money import format_date, format_datetime, format_money
    from records_toolkit.tracker.deadlines import days_until_due, display_status

    req = _require(ctx, request_id)
    click.echo(f"Request {req.id}")
    click.echo(f"  Title:        {req.title}")
    click.echo(f"  Category:     {req.record_type.value}")
    click.echo(f"  Agency:       {req.agency}")
    click.echo(f"  State:        {req.state or 'federal/other'}")
    click.echo(f"  Status:       {display_status(req).value}")
    click.echo(f"  Created:      {format_datetime(req.created_at)}")
    click.echo(f"  Updated:      {format_datetime(req.updated_at)}")
    click.echo(f"  Submitted:    {format_date(req.submitted_date)}")
    click.echo(f"  Acknowledged: {format_date(req.acknowledged_date)}")
    click.echo(f"  Due:          {format_date(req.due_date)}")
    click.echo(f"  Fulfilled:    {format_date(req.fulfilled_date)}")
    if req.due_date:
        click.echo(f"  Days Left:    {days_until_due(req.due_date)}")
    if req.estimated_cost is not None:
        click.echo(f"  Est. Cost:    {format_money(req.estimated_cost)}")
    if req.actual_cost is not None:
        click.echo(f"  Actual Cost:  {format_money(req.actual_cost)}")
    if req.denial_reason:
        click.echo(f"  Denial:       {req.denial_reason}")
    if req.notes:
        click.echo("  Notes:")
        for note in req.notes:
            click.echo(f"    [{format_date(note.date)}] ({note.type.value}) {note.summary}")
    if req.documents:
        click.echo("  Documents:")
        for doc in req.documents:
            click.echo(f"    [{format_date(doc.date)}] ({doc.type.value}) {doc.name}")


@track.command(name="submit")
@click.argument("request_id")
@click.option("--on", "submitted", default=None, help="Submission date (YYYY-MM-DD, default: today).")
@click.option("--due", default=None, help="Due date override (YYYY-MM-DD).")
@click.pass_context
def track_submit(
    ctx: click.Context, request_id: str, submitted: Optional[str], due: Optional[str]
) -> None:
    """Mark a request submitted and set its statutory due date."""
    from records_toolkit.money import format_date
    from records_toolkit.tracker.deadlines import compute_due_date

    store = _get_store(ctx)
    req = _require(ctx, request_id)
    submitted_on = _parse_date(submitted) if submitted else date.today()
    due_on = _parse_date(due) if due else compute_due_date(req.state, submitted_on)

    store.update(
        request_id,
        status=RequestStatus.SUBMITTED,
        submitted_date=submitted_on,
        due_date=due_on,
    )
    click.echo(f"Request {request_id} submitted on {format_date(submitted_on)}; "
               f"due {format_date(due_on)}.")


# Date field set when a request moves into each status.
_STATUS_DATE_FIELDS = {
    RequestStatus.ACKNOWLEDGED: "acknowledged_date",
    RequestStatus.FULFILLED: "fulfilled_date",
    RequestStatus.PARTIAL: "fulfilled_date",
    RequestStatus.APPEALED: "appeal_date",
}


@track.command(name="status")
@click.argument("request_id")
@click.argument("status", type=_STATUS_CHOICE)
@click.option("--on", "on_date", default=None, help="Date of the change (YYYY-MM-DD, default: today).")
@click.option("--actual-cost", default=None, type=float, help="Amount actually charged.")
@click.option("--actual-pages", default=None, type=int, help="Pages actually received.")
@click.option("--denial-reason", default=None, help="Reason given for a denial.")
@click.option("--appeal-outcome", default=None, help="Outcome of an appeal.")
@click.pass_context
def track_status(
    ctx: click.Context,
    request_id: str,
    status: str,
    on_date: Optional[str],
    actual_cost: Optional[float],
    actual_pages: Optional[int],
    denial_reason: Optional[str],
    appeal_outcome: Optional[str],
) -> None:
    """Update a request's status."""
    new_status = RequestStatus(status.lower())
    changes: dict = {"status": new_status}
    date_field = _STATUS_DATE_FIELDS.get(new_status)
    if date_field:
        changes[date_field] = _parse_date(on_date) if on_date else date.today()
    optional = {
        "actual_cost": actual_cost,
        "actual_pages": actual_pages,
        "denial_reason": denial_reason,
        "appeal_outcome": appeal_outcome,
    }
    changes.update({k: v for k, v in optional.items() if v is not None})

    req = _get_store(ctx).update(request_id, **changes)
    if req is None:
        raise click.ClickException(f"Request {request_id} not found.")
    click.echo(f"Updated request {req.id} to status: {req.status.value}")


@track.command(name="note")
@click.argument("request_id")
@click.argument("summary")
@click.option("--channel", default="other", type=click.Choice([c.value for c in NoteChannel]),
              help="How the communication happened.")
@click.option("--full-text", default=None, help="Full text of the communication.")
@click.option("--on", "on_date", default=None, help="Date (YYYY-MM-DD, default: today).")
@click.pass_context
def track_note(
    ctx: click.Context,
    request_id: str,
    summary: str,
    channel: str,
    full_text: Optional[str],
    on_date: Optional[str],
) -> None:
    """Add a correspondence note to a request."""
    req = _get_store(ctx).add_note(
        request_id,
        summary,
        channel=NoteChannel(channel),
        full_text=full_text,
        on=_parse_date(on_date) if on_date else None,
    )
    if req is None:
        raise click.ClickException(f"Request {request_id} not found.")
    click.echo(f"Note added to request {req.id}.")


@track.command(name="doc")
@click.argument("request_id")
@click.argument("name")
@click.option("--type", "doc_type", default="other", type=click.Choice([d.value for d in DocumentType]),
              help="Document type.")
@click.option("--file", "file_url", default=None, help="File path or URL of the document.")
@click.option("--notes", default=None, help="Notes about the document.")
@click.option("--on", "on_date", default=None, help="Date (YYYY-MM-DD, default: today).")
@click.pass_context
def track_doc(
    ctx: click.Context,
    request_id: str,
    name: str,
    doc_type: str,
    file_url: Optional[str],
    notes: Optional[str],
    on_date: Optional[str],
) -> None:
    """Attach a document record to a request."""
    req = _get_store(ctx).add_document(
        request_id,
        name,
        doc_type=DocumentType(doc_type),
        file_url=file_url,
        notes=notes,
        on=_parse_date(on_date) if on_date else None,
    )
    if req is None:
        raise click.ClickException(f"Request {request_id} not found.")
    click.echo(f"Document added to request {req.id}.")


@track.command(name="delete")
@click.argument("request_id")
@click.confirmation_option(prompt="Delete this request permanently?")
@click.pass_context
def track_delete(ctx: click.Context, request_id: str) -> None:
    """Delete a request permanently."""
    if not _get_store(ctx).delete_by_id(request_id):
        raise click.ClickException(f"Request {request_id} not found.")
    click.echo(f"Deleted request {request_id}.")


# ---------------------------------------------------------------------------
# stats
# ---------------------------------------------------------------------------

@cli.command()
@click.option("--json-output", is_flag=True, help="Output as JSON instead of plain text.")
@click.pass_context
def stats(ctx: click.Context, json_output: bool) -> None:
    """Show request statistics."""
    from records_toolkit.money import format_money
    from records_toolkit.tracker.stats import compute_stats

    result = compute_stats(_get_store(ctx).load())
    if json_output:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    click.echo("=== Public Records Request Statistics ===")
    click.echo(f"Total requests:     {result.total}")
    click.echo(f"Overdue:            {result.overdue_count}")
    click.echo(f"Fulfillment rate:   {result.fulfillment_rate}%")
    click.echo(f"Denial rate:        {result.denial_rate}%")
    click.echo(f"Avg response time:  {result.avg_response_time} days")
    click.echo(f"Avg cost:           {format_money(result.avg_cost)}")
    if result.by_status:
        click.echo("\nBy status:")
        for status, count in sorted(result.by_status.items()):
            click.echo(f"  {status:15s}: {count}")
    if result.by_state:
        click.echo("\nBy state:")
        for state, count in sorted(result.by_state.items()):
            click.echo(f"  {state:15s}: {count}")


# ---------------------------------------------------------------------------
# follow-up / appeal
# ---------------------------------------------------------------------------

@cli.command(name="follow-up")
@click.argument("request_id")
@click.option("--output", "-o", default=None, help="Output file path.")
@click.pass_context
def follow_up(ctx: click.Context, request_id: str, output: Optional[str]) -> None:
    """Generate a follow-up letter for an overdue request."""
    from records_toolkit.letters.followup import generate_follow_up
    from records_toolkit.tracker.deadlines import is_overdue

    req = _require(ctx, request_id)
    if not is_overdue(req):
        click.echo(f"Note: request {req.id} is not overdue.", err=True)
    _emit(generate_follow_up(req), output)


@cli.command()
@click.argument("request_id")
@click.option("--reason", "-r", required=True,
              type=click.Choice([r.value for r in AppealReason]),
              help="Grounds for the appeal.")
@click.option("--explanation", "-e", default="", help="Your explanation of the grounds.")
@click.option("--legal-basis", "-l", multiple=True, help="Legal authority to cite (repeatable).")
@click.option("--denial-date", default=None, help="Date of the denial (YYYY-MM-DD).")
@click.option("--record-appeal", is_flag=True, help="Mark the request appealed as of today.")
@click.option("--output", "-o", default=None, help="Output file path.")
@click.pass_context
def appeal(
    ctx: click.Context,
    request_id: str,
    reason: str,
    explanation: str,
    legal_basis: tuple[str, ...],
    denial_date: Optional[str],
    record_appeal: bool,
    output: Optional[str],
) -> None:
    """Generate an appeal letter for a denied or inadequately answered request."""
    from records_toolkit.letters.appeals import AppealData, generate_appeal

    req = _require(ctx, request_id)
    data = AppealData.from_record(
        req,
        AppealReason(reason),
        explanation=explanation,
        legal_basis=list(legal_basis),
        denial_date=_parse_date(denial_date) if denial_date else None,
    )
    _emit(generate_appeal(data), output)

    if record_appeal:
        _get_store(ctx).update(request_id, status=RequestStatus.APPEALED, appeal_date=date.today())
        click.echo(f"Request {request_id} marked appealed.", err=True)


# ---------------------------------------------------------------------------
# Utility
# ---------------------------------------------------------------------------

def _parse_date(s: str) -> date:
    try:
        return datetime.strptime(s, "%Y-%m-%d").date()
    except ValueError:
        raise click.BadParameter(f"Invalid date format: {s}. Use YYYY-MM-DD.")


def _parse_fields(pairs: tuple[str, ...]) -> dict[str, str]:
    fields: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"Expected key=value, got '{pair}'.", param_hint="--field")
        fields[key.strip()] = value.strip()
    return fields


def _require(ctx: click.Context, request_id: str):
    req = _get_store(ctx).get(request_id)
    if req is None:
        raise click.ClickException(f"Request {request_id} not found.")
    return req


def _emit(text: str, output: Optional[str]) -> None:
    if output:
        Path(output).write_text(text + "\n", encoding="utf-8")
        click.echo(f"Letter written to {output}", err=True)
    else:
        click.echo(text)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
