import logging

from flask import Flask, jsonify, render_template, request

from loan_schedule import config
from loan_schedule.data_models import AmortizationResult, LoanInput
from loan_schedule.engine import compute_for
from loan_schedule.formatter import EMPTY_SCHEDULE_MESSAGE, format_currency, payments_label
from loan_schedule.utils import parse_amount, parse_rate, parse_term, years_label

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.jinja_env.filters["currency"] = format_currency

FIELD_LABELS = {
    "principal": "Loan Amount",
    "annual_rate_percent": "Annual Interest Rate (%)",
    "term_months": "Loan Term (months)",
}


def _form_values(source) -> dict:
    return {
        "principal": source.get("principal", config.DEFAULT_PRINCIPAL).strip(),
        "rate": source.get("rate", config.DEFAULT_RATE).strip(),
        "term": source.get("term", config.DEFAULT_TERM).strip(),
    }


def _values_to_input(values: dict) -> LoanInput:
    return LoanInput(
        principal=parse_amount(values["principal"]),
        annual_rate_percent=parse_rate(values["rate"]),
        term_months=parse_term(values["term"]),
    )


def _years_for(term_text: str) -> str:
    try:
        return years_label(parse_term(term_text))
    except ValueError:
        return ""


def _serialize_result(result: AmortizationResult) -> dict:
    return {
        "summary": result.summary.to_dict() if result.summary else None,
        "schedule": [record.to_dict() for record in result.records],
        "invalid_field": result.invalid_field,
    }


@app.route("/", methods=["GET", "POST"])
def index():
    values = _form_values(request.form if request.method == "POST" else request.args)
    result = AmortizationResult()
    error = None
    try:
        result = compute_for(_values_to_input(values))
    except ValueError as exc:
        logger.debug("Could not parse form input: %s", exc)
        error = str(exc)
    if result.invalid_field and not error:
        error = f"{FIELD_LABELS[result.invalid_field]} is not valid"

    preview_rows = config.get_preview_rows()
    records = result.records
    show_full_schedule = request.values.get("show_full_schedule") == "1"
    schedule = records if show_full_schedule else records[:preview_rows]

    return render_template(
        "index.html",
        values=values,
        years=_years_for(values["term"]),
        summary=result.summary,
        schedule=schedule,
        truncated=len(records) - len(schedule),
        payments_label=payments_label(len(records)),
        empty_message=EMPTY_SCHEDULE_MESSAGE,
        error=error,
    )


@app.get("/api/schedule")
def api_schedule():
    values = _form_values(request.args)
    try:
        loan = _values_to_input(values)
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400
    payload = _serialize_result(compute_for(loan))
    payload["years"] = years_label(loan.term_months)
    return jsonify(payload)


if __name__ == "__main__":
    config.configure_logging()
    print("Starting Loan Schedule web app...")
    app.run(host="0.0.0.0", port=config.get_port(), debug=True)
