# api/v1/router.py
from fastapi import APIRouter

from . import assessments, diets, meal_plans, symptoms

api_router = APIRouter()

api_router.include_router(assessments.router, prefix="/assessments", tags=["Assessments"])
api_router.include_router(meal_plans.router,  prefix="/meal-plans", tags=["Meal plans"])
api_router.include_router(symptoms.router,    prefix="/symptoms", tags=["Symptoms"])
api_router.include_router(diets.router,       prefix="/diets", tags=["Diets"])
