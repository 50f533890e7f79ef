"""Fixed recognition prompt and structured output schema for Gemini.

The schema uses Gemini's OpenAPI subset. No property is listed as required,
so any of the four fields may be missing from the reply.
"""

RECOGNITION_PROMPT = (
    "Analyze the image of this cow. Focus on its features like coloration, "
    "body structure, and head shape to identify its breed. Provide the places "
    "where this breed is popularly found. If the image does not clearly show "
    "a cow, please indicate that. Provide a confidence score for your "
    "identification."
)

BREED_INFO_SCHEMA: dict = {
    "type": "OBJECT",
    "properties": {
        "breed": {
            "type": "STRING",
            "description": (
                "The identified breed of the cow. "
                "e.g., 'Holstein Friesian', 'Angus', 'Hereford'."
            ),
        },
        "description": {
            "type": "STRING",
            "description": (
                "A brief, interesting one-paragraph description of the breed's "
                "characteristics, origin, or primary use."
            ),
        },
        "confidence": {
            "type": "NUMBER",
            "description": "A confidence score from 0.0 to 1.0 on the breed identification.",
        },
        "error": {
            "type": "STRING",
            "description": (
                "An error message if a cow is not detected in the image. "
                "e.g., 'No cow was detected in the provided image.'"
            ),
        },
    },
}
