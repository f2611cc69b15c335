"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse

from nutrilog.api.schemas import (
    ExportRequest,
    FoodPayload,
    MealEntryRequest,
    MealRequest,
    MealResponse,
    MealUpdateRequest,
    PortionRequest,
    ProfilePayload,
    StateResponse,
    TotalsResponse,
)
from nutrilog.app_logging import configure_logging
from nutrilog.config import resolve_export_path
from nutrilog.containers import AppContainer
from nutrilog.domain.errors import (
    ExportError,
    InvalidArgumentError,
    PersistenceError,
)
from nutrilog.domain.identifiers import MealId
from nutrilog.domain.meals import Meal
from nutrilog.services.model import AppModel


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app serving the container's model."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        try:
            app.state.container.save()
        except PersistenceError:
            logger.exception("Failed to save model on shutdown")

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(InvalidArgumentError)
    async def invalid_argument_handler(
        request: Request, exc: InvalidArgumentError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)}
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/state")
    async def state(request: Request) -> StateResponse:
        """Return the profile, the day's meals, totals, targets and foods."""
        return _build_state(_model(request))

    @app.get("/today", response_class=PlainTextResponse)
    async def today(request: Request) -> str:
        """Return a plain-text summary of the day."""
        return _format_daily_summary(_model(request))

    @app.put("/profile")
    async def update_profile(
        payload: ProfilePayload, request: Request
    ) -> ProfilePayload:
        """Replace the user profile."""
        model = _model(request)
        model.update_user_profile(payload.to_domain())
        return ProfilePayload.from_domain(model.user_profile)

    @app.post("/meals", status_code=status.HTTP_201_CREATED)
    async def add_meal(payload: MealRequest, request: Request) -> MealResponse:
        """Log a meal from individual fields, scaled by the portion."""
        model = _model(request)
        meal = Meal(
            name=payload.name.strip(),
            category_tag=payload.category_tag,
            protein=payload.protein,
            carbs=payload.carbs,
            fat=payload.fat,
            calories=payload.calories,
            consumed_on=model.log_date,
        ).scale_by(payload.portion)
        model.add_meal(meal)
        return MealResponse.from_domain(meal)

    @app.post("/meals/entry", status_code=status.HTTP_201_CREATED)
    async def add_meal_entry(
        payload: MealEntryRequest, request: Request
    ) -> MealResponse:
        """Log a meal from quick-entry text."""
        meal = _model(request).add_meal_from_entry(payload.entry)
        return MealResponse.from_domain(meal)

    @app.put("/meals/{meal_id}")
    async def update_meal(
        meal_id: str, payload: MealUpdateRequest, request: Request
    ) -> MealResponse:
        """Overwrite the name and macros of a logged meal."""
        model = _model(request)
        meal = _require_meal(model, meal_id)
        model.update_meal(
            meal.id,
            payload.name,
            payload.protein,
            payload.carbs,
            payload.fat,
            payload.calories,
        )
        return MealResponse.from_domain(meal)

    @app.delete("/meals/{meal_id}")
    async def remove_meal(meal_id: str, request: Request) -> dict[str, str]:
        """Remove a logged meal."""
        model = _model(request)
        meal = _require_meal(model, meal_id)
        model.remove_meal(meal.id)
        return {"status": "ok"}

    @app.post("/meals/{meal_id}/save-as-food", status_code=status.HTTP_201_CREATED)
    async def save_meal_as_food(meal_id: str, request: Request) -> FoodPayload:
        """Store a logged meal as a custom food."""
        model = _model(request)
        meal = _require_meal(model, meal_id)
        return FoodPayload.from_domain(model.save_meal_as_food(meal.id))

    @app.get("/foods")
    async def list_foods(request: Request) -> dict[str, list[FoodPayload]]:
        """Return custom foods sorted by name."""
        return {"foods": _sorted_foods(_model(request))}

    @app.post("/foods", status_code=status.HTTP_201_CREATED)
    async def add_food(payload: FoodPayload, request: Request) -> FoodPayload:
        """Add or replace a custom food."""
        food = payload.to_domain()
        _model(request).add_custom_food(food)
        return FoodPayload.from_domain(food)

    @app.delete("/foods/{name}")
    async def remove_food(name: str, request: Request) -> dict[str, str]:
        """Remove a custom food by name."""
        if not _model(request).remove_custom_food(name):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Custom food {name!r} not found.",
            )
        return {"status": "ok"}

    @app.post("/foods/{name}/log", status_code=status.HTTP_201_CREATED)
    async def log_food(
        name: str, payload: PortionRequest, request: Request
    ) -> MealResponse:
        """Log a portion of a custom food."""
        model = _model(request)
        if not model.food_database.has_food(name):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Custom food {name!r} not found.",
            )
        meal = model.log_custom_food(name, payload.portion)
        return MealResponse.from_domain(meal)

    @app.post("/export")
    async def export(payload: ExportRequest, request: Request) -> dict[str, str]:
        """Export the day's meals and profile to CSV."""
        container: AppContainer = request.app.state.container
        target = resolve_export_path(container.settings.export_dir, payload.filename)
        try:
            container.model.export_nutrition_data(target)
        except ExportError as exc:
            logger.exception("Export failed", extra={"target": str(target)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to export data: {exc}",
            ) from exc
        return {"status": "ok", "path": str(target)}

    return app


def _model(request: Request) -> AppModel:
    container: AppContainer = request.app.state.container
    return container.model


def _require_meal(model: AppModel, raw_id: str) -> Meal:
    meal = model.meal_log.get_meal(MealId(raw_id))
    if meal is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Meal with id {raw_id} not found.",
        )
    return meal


def _sorted_foods(model: AppModel) -> list[FoodPayload]:
    foods = sorted(model.food_database.get_all_foods(), key=lambda food: food.key)
    return [FoodPayload.from_domain(food) for food in foods]


def _build_state(model: AppModel) -> StateResponse:
    meal_log = model.meal_log
    requirements = model.get_daily_requirements()
    return StateResponse(
        log_date=meal_log.log_date,
        profile=ProfilePayload.from_domain(model.user_profile),
        meals=[MealResponse.from_domain(meal) for meal in meal_log.meals],
        totals=TotalsResponse(
            calories=meal_log.total_calories,
            protein=meal_log.total_protein,
            carbs=meal_log.total_carbs,
            fat=meal_log.total_fat,
        ),
        requirements=TotalsResponse.from_requirements(requirements),
        remaining_calories=meal_log.remaining_calories(requirements),
        foods=_sorted_foods(model),
    )


def _format_daily_summary(model: AppModel) -> str:
    """Format the day's totals against targets."""
    meal_log = model.meal_log
    requirements = model.get_daily_requirements()
    remaining = meal_log.remaining_calories(requirements)
    lines = [
        f"{meal_log.log_date} totals:",
        f"Calories: {meal_log.total_calories:.0f} / {requirements.calories:.0f}",
        f"Protein: {meal_log.total_protein:.1f} / {requirements.protein:.1f} g",
        f"Carbs: {meal_log.total_carbs:.1f} / {requirements.carbs:.1f} g",
        f"Fat: {meal_log.total_fat:.1f} / {requirements.fat:.1f} g",
    ]
    if remaining >= 0:
        lines.append(f"Remaining: {remaining:.0f} kcal")
    else:
        lines.append(f"Over target by {-remaining:.0f} kcal")
    if meal_log.meals:
        lines.append("Meals:")
        for meal in meal_log.meals:
            lines.append(f"- {meal}")
    return "\n".join(lines)
