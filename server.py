# server.py
import logging

from flask import Flask, Response, request

from config import MAX_RESULTS, TEXT_CONTENT_TYPE, XML_CONTENT_TYPE, ReportConfig, parse_number
from errors import RequestError
from exporter import render_xml
from flight_filter import apply_query
from records import QueryParameters, RecordSet

logger = logging.getLogger(__name__)


def query_from_args(args) -> QueryParameters:
    """Read ?date=true&airtime_min=<float>; anything unparseable means no filter."""
    return QueryParameters(
        airtime_threshold=parse_number(args.get("airtime_min")),
        show_date=args.get("date") == "true",
        result_cap=MAX_RESULTS,
    )


def create_app(records: RecordSet) -> Flask:
    """Build the app serving the given (already loaded) records."""
    app = Flask(__name__)

    @app.route("/", methods=["GET"])
    def flights():
        try:
            query = query_from_args(request.args)
            xml = render_xml(apply_query(records, query), query.show_date)
        except Exception as e:
            raise RequestError(f"Request error: {e}") from e
        return Response(xml, status=200, content_type=XML_CONTENT_TYPE)

    @app.errorhandler(RequestError)
    def request_failed(e):
        logger.error(str(e), exc_info=e)
        return Response("Internal Server Error", status=500, content_type=TEXT_CONTENT_TYPE)

    return app


def run_server(config: ReportConfig, records: RecordSet) -> None:
    """Serve forever on config.host:config.port."""
    app = create_app(records)
    print(f"Server running at http://{config.host}:{config.port}/")
    print(f"Using file: {config.input_path}")
    app.run(host=config.host, port=config.port)
