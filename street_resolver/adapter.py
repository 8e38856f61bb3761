"""
Voice assistant tool-call adapter for the lookup_address tool.

The assistant has sent lookup requests in several shapes over time (a bare
argument object, or a tool call wrapped in message.toolCalls, toolCallList or
toolWithToolCallList). Everything here turns those into one LookupRequest
and turns the engine's Outcome back into the tool-call response envelope.
The assistant ignores any status other than 200, so every response uses 200
and failures travel in the "error" field.
"""
import json
from typing import Any, Dict, Optional

from loguru import logger

from street_resolver.config import DEFAULT_RESTAURANT_ID
from street_resolver.exceptions import InvalidLookupRequest
from street_resolver.models import Error, LookupRequest, Outcome
from street_resolver.resolution_service import ResolutionService

TOOL_NAME = "lookup_address"

RESPONSE_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}

_TOOL_CALL_LISTS = ("toolCalls", "toolCallList", "toolWithToolCallList")


def _to_single_line(value: Any) -> str:
    return " ".join(str(value if value is not None else "").splitlines()).strip()


def _parse_body(body: Any) -> Dict[str, Any]:
    if body is None:
        return {}
    if isinstance(body, (str, bytes)):
        try:
            body = json.loads(body) if body else {}
        except ValueError as e:
            raise InvalidLookupRequest("body", f"Request body is not valid JSON: {e}") from e
    if not isinstance(body, dict):
        raise InvalidLookupRequest("body", "Request body must be a JSON object")
    return body


def _find_tool_call(body: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    message = body.get("message")
    if not isinstance(message, dict):
        return None
    for list_name in _TOOL_CALL_LISTS:
        calls = message.get(list_name)
        if not isinstance(calls, list):
            continue
        for call in calls:
            if not isinstance(call, dict):
                continue
            function = call.get("function")
            if not isinstance(function, dict):
                function = {}
            if (function.get("name") or call.get("name")) == TOOL_NAME:
                return call
    return None


def extract_tool_call_id(body: Any) -> Optional[str]:
    """Return the toolCallId the response must echo, if there is one."""
    try:
        parsed = _parse_body(body)
    except InvalidLookupRequest as e:
        logger.debug(f"Could not extract toolCallId: {e}")
        return None
    if parsed.get("toolCallId"):
        return parsed["toolCallId"]
    call = _find_tool_call(parsed)
    if call and call.get("id"):
        return call["id"]
    return None


def _extract_arguments(body: Dict[str, Any]) -> Dict[str, Any]:
    call = _find_tool_call(body)
    if call is None:
        return body
    function = call.get("function")
    if not isinstance(function, dict):
        function = {}
    raw_args = function.get("arguments")
    if raw_args is None:
        params = function.get("parameters")
        if isinstance(params, dict):
            raw_args = params.get("arguments")
    if raw_args is None:
        raw_args = call.get("arguments")
    if raw_args is None:
        return body
    if isinstance(raw_args, str):
        try:
            raw_args = json.loads(raw_args)
        except ValueError as e:
            raise InvalidLookupRequest("arguments", f"Tool arguments are not valid JSON: {e}") from e
    if not isinstance(raw_args, dict):
        raise InvalidLookupRequest("arguments", "Tool arguments must be a JSON object")
    return raw_args


def _extract_restaurant_id(args: Dict[str, Any], body: Dict[str, Any]) -> Optional[str]:
    if args.get("restaurantId"):
        return str(args["restaurantId"])
    for owner in ("call", "assistant"):
        owner_obj = body.get(owner)
        metadata = owner_obj.get("metadata") if isinstance(owner_obj, dict) else None
        if isinstance(metadata, dict) and metadata.get("restaurantId"):
            return str(metadata["restaurantId"])
    if body.get("assistantId"):
        return str(body["assistantId"])
    return None


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _attempt_number(value: Any) -> int:
    try:
        return int(value) if value not in (None, "") else 1
    except (TypeError, ValueError):
        logger.debug(f"Ignoring non-numeric attempt value: {value!r}")
        return 1


def parse_lookup_request(
    body: Any, default_restaurant_id: Optional[str] = DEFAULT_RESTAURANT_ID
) -> LookupRequest:
    """
    Normalise any supported request shape into a LookupRequest.

    Raises InvalidLookupRequest when the body or its tool arguments are not
    JSON objects. Missing fields are left as None for the engine to report.
    """
    parsed = _parse_body(body)
    args = _extract_arguments(parsed)

    restaurant_id = _extract_restaurant_id(args, parsed)
    if restaurant_id is None and default_restaurant_id:
        logger.warning("restaurantId missing in request; using DEFAULT_RESTAURANT_ID fallback")
        restaurant_id = default_restaurant_id

    return LookupRequest(
        restaurant_id=restaurant_id,
        zip_code=_optional_str(args.get("zipCode")),
        street_number=_optional_str(args.get("streetNumber")),
        street_name=_optional_str(args.get("streetName")),
        spelled_street_name=_optional_str(args.get("spelledStreetName")),
        attempt_number=_attempt_number(args.get("attempt")),
    )


def tool_response(tool_call_id: Optional[str], outcome: Outcome) -> Dict[str, Any]:
    """Wrap an outcome in the tool-call envelope. The status code is always 200."""
    entry: Dict[str, Any] = {}
    if tool_call_id:
        entry["toolCallId"] = tool_call_id
    if isinstance(outcome, Error):
        entry["error"] = _to_single_line(outcome.message)
    else:
        entry["result"] = outcome.to_payload()
    return {
        "statusCode": 200,
        "headers": dict(RESPONSE_HEADERS),
        "body": json.dumps({"results": [entry]}),
    }


async def handle_lookup(
    body: Any,
    service: ResolutionService,
    default_restaurant_id: Optional[str] = DEFAULT_RESTAURANT_ID,
) -> Dict[str, Any]:
    """Serve one lookup_address tool call end to end. Never raises."""
    tool_call_id = extract_tool_call_id(body)
    logger.debug(f"lookup_address toolCallId: {tool_call_id or '(none)'}")
    try:
        request = parse_lookup_request(body, default_restaurant_id)
    except InvalidLookupRequest as e:
        logger.warning(f"Unparseable lookup request: {e}")
        return tool_response(tool_call_id, Error(message=str(e)))
    outcome = await service.resolve(request)
    return tool_response(tool_call_id, outcome)
