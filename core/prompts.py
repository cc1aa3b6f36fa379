"""
Prompt templates and response schemas for the four Gemini request kinds.
"""
from __future__ import annotations

from core.models.insight import MAX_RELATED_TOPICS
from core.ports import SchemaDescriptor

# ───────────── Prompts ─────────────
EXPLAIN_PROMPT = (
    'As a trusted nutrition expert, give a detailed explanation and comparison of: "{query}". '
    "Base your answer primarily on the latest guidelines and recommendations of recognised "
    "international health organisations such as the American Diabetes Association, the "
    "American Heart Association and the FDA. Explain the benefits, the risks, and the allowed "
    "and forbidden foods for every diet mentioned. Use clear language suitable for non-specialists."
)

RELATED_TOPICS_PROMPT = (
    'Based on the following nutrition topic: "{query}", create a list of {count} related '
    "questions or comparison topics the user may also be interested in. "
    "The response must be JSON."
)

SYMPTOMS_PROMPT = (
    'As a specialised nutrition expert, analyse the following symptoms: "{symptoms}". '
    "Based on these symptoms and reliable scientific literature, identify the 3 most likely "
    "vitamin or mineral deficiencies. For each one give a simple explanation, a list of foods "
    "rich in it, and the recommended daily allowance (RDA) for adults according to the NIH or "
    "an equivalent body. End with a clear warning to consult a doctor before taking any "
    "supplements. The response must be JSON."
)

MEAL_PLAN_PROMPT = (
    "As a professional dietitian, create a healthy, balanced one-day meal plan with the "
    'following criteria: target calories: {calories} kcal, diet type: "{diet}", goal: "{goal}". '
    "{allergy_clause}"
    "Split the plan into 4 meals: breakfast, lunch, dinner and a snack. For each meal give the "
    "meal name, the dish name, its ingredients and its approximate calories. The total calories "
    "must be very close to the target. The response must be JSON."
)

ALLERGY_CLAUSE = "Avoid foods that contain the following allergens: {allergens}. "


def explain_prompt(query: str) -> str:
    return EXPLAIN_PROMPT.format(query=query)


def related_topics_prompt(query: str) -> str:
    return RELATED_TOPICS_PROMPT.format(query=query, count=MAX_RELATED_TOPICS)


def symptoms_prompt(symptoms: str) -> str:
    return SYMPTOMS_PROMPT.format(symptoms=symptoms)


def meal_plan_prompt(calories: int, diet: str, goal: str, allergies: list[str]) -> str:
    clause = ALLERGY_CLAUSE.format(allergens=", ".join(allergies)) if allergies else ""
    return MEAL_PLAN_PROMPT.format(
        calories=calories, diet=diet, goal=goal, allergy_clause=clause
    )


# ───────────── Response schemas ─────────────
_STRING_LIST: SchemaDescriptor = {"type": "ARRAY", "items": {"type": "STRING"}}

RELATED_TOPICS_SCHEMA: SchemaDescriptor = {
    "type": "OBJECT",
    "properties": {
        "related_topics": {
            **_STRING_LIST,
            "description": f"A list of {MAX_RELATED_TOPICS} related diet questions or topics.",
        },
    },
    "required": ["related_topics"],
}

DEFICIENCY_SCHEMA: SchemaDescriptor = {
    "type": "OBJECT",
    "properties": {
        "potentialDeficiencies": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "name": {"type": "STRING", "description": "Vitamin or mineral name"},
                    "explanation": {
                        "type": "STRING",
                        "description": "Simple explanation of the link to the symptoms",
                    },
                    "foodSources": _STRING_LIST,
                    "recommendedDosage": {
                        "type": "STRING",
                        "description": "Recommended daily allowance for adults",
                    },
                },
            },
        },
        "disclaimer": {
            "type": "STRING",
            "description": "Warning to consult a doctor",
        },
    },
}

MEAL_PLAN_SCHEMA: SchemaDescriptor = {
    "type": "OBJECT",
    "properties": {
        "totalCalories": {"type": "NUMBER"},
        "meals": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "name": {
                        "type": "STRING",
                        "description": "Meal name (breakfast, lunch, dinner, snack)",
                    },
                    "dish": {"type": "STRING", "description": "Dish name"},
                    "calories": {"type": "NUMBER"},
                    "ingredients": _STRING_LIST,
                },
                "required": ["name", "dish", "calories", "ingredients"],
            },
        },
    },
    "required": ["totalCalories", "meals"],
}
