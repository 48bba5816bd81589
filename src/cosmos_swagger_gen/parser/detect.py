"""Auto-detect the API description format of a decoded document."""


def detect_format(data: object) -> str:
    """Detect the format of a decoded API description.

    Returns: 'swagger2', 'openapi3', or 'unknown'.
    """
    if not isinstance(data, dict):
        return "unknown"

    if "swagger" in data:
        if str(data["swagger"]).startswith("2"):
            return "swagger2"
        return "unknown"
    if "openapi" in data and str(data["openapi"]).startswith("3"):
        return "openapi3"

    # Swagger files exported without a version header still carry `paths`.
    if "paths" in data and "definitions" in data:
        return "swagger2"

    return "unknown"
