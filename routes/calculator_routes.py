from flask import Blueprint, request, jsonify, render_template, current_app

from config import MESSAGE_AUTO_HIDE_MS
from models.capital import get_all_capitals, get_distance_between_capitals
from models.transport import (
    WALKING,
    get_emission_factor,
    get_human_respiration_factor,
    get_transport_name_with_icon,
    get_transport_types,
    is_known_transport
)
from models.trip import TripInput
from utils.co2_calculator import (
    compute_trip,
    estimate_trees_to_offset,
    format_distance,
    format_emission
)
from utils.validators import (
    DISTANCE_UNKNOWN,
    SAME_CITY,
    get_form_data,
    validate_calculation_inputs,
    validate_form
)

calculator_bp = Blueprint('calculator', __name__)

SUCCESS_MESSAGE = 'Calculation completed successfully!'
UNKNOWN_TRANSPORT = 'Transport type not found or invalid.'
RESET_MESSAGE = 'Form reset. You can make a new calculation.'


class CalculationError(Exception):
    pass


def run_calculation(source):
    """Validate a submitted trip and compute its emissions.

    Returns the display payload for the result panel. Raises CalculationError
    carrying the user-facing message when the input is rejected.
    """
    form = get_form_data(source)
    validation = validate_form(form)
    if not validation.is_valid:
        raise CalculationError(validation.message)

    if not is_known_transport(form.transport_id):
        raise CalculationError(UNKNOWN_TRANSPORT)
    transport_factor = get_emission_factor(form.transport_id)

    validation = validate_calculation_inputs(form.distance_km, transport_factor)
    if not validation.is_valid:
        raise CalculationError(validation.message)

    trip = TripInput(
        distance_km=form.distance_km,
        transport_emission_factor=transport_factor,
        people_count=form.people,
        transport_id=form.transport_id,
        human_respiration_factor=get_human_respiration_factor()
    )
    emission, detailed = compute_trip(trip)
    show_detailed = form.transport_id != WALKING

    current_app.logger.info(
        f"Calculated {emission:.3f} kg CO2 for {form.origin} -> {form.destination} "
        f"by {form.transport_id} ({form.people} people)"
    )

    return {
        'origin': form.origin,
        'destination': form.destination,
        'distance': format_distance(form.distance_km),
        'transport': get_transport_name_with_icon(form.transport_id),
        'people': form.people,
        'transport_per_person': format_emission(detailed.transport_per_person),
        'human_per_person': format_emission(detailed.human_per_person),
        'emission_per_person': format_emission(detailed.total_per_person) if show_detailed else '0 kg CO₂',
        'emission': format_emission(emission),
        'show_detailed': show_detailed,
        'trees_to_offset': estimate_trees_to_offset(emission)
    }


def render_form(result=None, message=None, message_type='success', form_values=None):
    return render_template(
        'index.html',
        capitals=get_all_capitals(),
        transports=get_transport_types(),
        result=result,
        message=message,
        message_type=message_type,
        form_values=form_values or {},
        auto_hide_ms=MESSAGE_AUTO_HIDE_MS
    )


@calculator_bp.route('/', methods=['GET'])
def index():
    if request.args.get('reset'):
        return render_form(message=RESET_MESSAGE)
    return render_form()


@calculator_bp.route('/', methods=['POST'])
def submit_form():
    try:
        result = run_calculation(request.form)
    except CalculationError as e:
        current_app.logger.warning(f"Rejected form submission: {e}")
        return render_form(message=str(e), message_type='error', form_values=request.form), 400

    return render_form(result=result, message=SUCCESS_MESSAGE, form_values=request.form)


@calculator_bp.route('/calculate', methods=['POST'])
def calculate():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Request body must be JSON"}), 400

    try:
        result = run_calculation(data)
    except CalculationError as e:
        current_app.logger.warning(f"Rejected calculation request: {e}")
        return jsonify({"error": str(e)}), 400

    result['message'] = SUCCESS_MESSAGE
    return jsonify(result), 200


@calculator_bp.route('/distance', methods=['GET'])
def distance():
    origin = request.args.get('origin', '').strip()
    destination = request.args.get('destination', '').strip()
    if not origin or not destination:
        return jsonify({"error": "Both origin and destination are required"}), 400

    if origin == destination:
        return jsonify({"error": SAME_CITY}), 400

    distance_km = get_distance_between_capitals(origin, destination)
    if distance_km is None:
        return jsonify({"error": DISTANCE_UNKNOWN}), 404

    return jsonify({
        'origin': origin,
        'destination': destination,
        'distance_km': distance_km,
        'distance': format_distance(distance_km)
    }), 200


@calculator_bp.route('/capitals', methods=['GET'])
def capitals():
    return jsonify(get_all_capitals()), 200


@calculator_bp.route('/transports', methods=['GET'])
def transports():
    return jsonify([t.to_dict() for t in get_transport_types()]), 200
