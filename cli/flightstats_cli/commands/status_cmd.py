from __future__ import annotations

import typer

from .. import console
from ..config import load_config
from ..http import api_errors, make_client, parse_day

app = typer.Typer(help="Flight status lookups.")


@app.command("by-id")
def status_by_id(
        flight_id: int = typer.Argument(..., help="FlightStats flight id."),
):
    cfg = load_config()
    with api_errors(), make_client(cfg) as client:
        data = client.flight_status.get_flight_status_by_id(flight_id)
    console.print_json(data)


@app.command("arr")
def status_by_arrival(
        carrier: str = typer.Argument(..., help="Carrier code, e.g. AA."),
        flight: str = typer.Argument(..., help="Flight number."),
        day: str = typer.Argument(..., help="Arrival date (YYYY-MM-DD)."),
):
    cfg = load_config()
    when = parse_day(day)
    with api_errors(), make_client(cfg) as client:
        data = client.flight_status.get_flight_status_by_arrival_date(carrier, flight, when)
    console.print_json(data)


@app.command("dep")
def status_by_departure(
        carrier: str = typer.Argument(..., help="Carrier code, e.g. AA."),
        flight: str = typer.Argument(..., help="Flight number."),
        day: str = typer.Argument(..., help="Departure date (YYYY-MM-DD)."),
):
    cfg = load_config()
    when = parse_day(day)
    with api_errors(), make_client(cfg) as client:
        data = client.flight_status.get_flight_status_by_departure_date(carrier, flight, when)
    console.print_json(data)
