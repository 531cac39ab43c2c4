from __future__ import annotations

import typer

from .. import console
from ..config import load_config
from ..http import api_errors, make_client, parse_day

app = typer.Typer(help="Scheduled flight lookups.")


@app.command("departing")
def departing(
        carrier: str = typer.Argument(..., help="Carrier code, e.g. AA."),
        flight: str = typer.Argument(..., help="Flight number."),
        day: str = typer.Argument(..., help="Departure date (YYYY-MM-DD)."),
):
    cfg = load_config()
    when = parse_day(day)
    with api_errors(), make_client(cfg) as client:
        flights = client.schedules.get_departing_flights(carrier, flight, when)
    if not flights:
        console.warn("No scheduled flights found.")
    console.print_json(flights)


@app.command("arriving")
def arriving(
        carrier: str = typer.Argument(..., help="Carrier code, e.g. AA."),
        flight: str = typer.Argument(..., help="Flight number."),
        day: str = typer.Argument(..., help="Arrival date (YYYY-MM-DD)."),
):
    cfg = load_config()
    when = parse_day(day)
    with api_errors(), make_client(cfg) as client:
        flights = client.schedules.get_arriving_flights(carrier, flight, when)
    if not flights:
        console.warn("No scheduled flights found.")
    console.print_json(flights)
