"""FastAPI application factory."""

import logging

from fastapi import FastAPI, HTTPException, Request, status

from food_suitability.api.schemas import ScoreRequest, score_payload
from food_suitability.app_logging import configure_logging
from food_suitability.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(debug=container.settings.debug)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Food suitability")
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/models")
    async def list_models(request: Request) -> dict[str, object]:
        """Return available scoring model versions."""
        state_container: AppContainer = request.app.state.container
        service = state_container.scoring_service
        return {
            "default": service.default_version,
            "default_mode": service.default_mode.value,
            "models": service.available_models(),
        }

    @app.post("/score")
    async def score(body: ScoreRequest, request: Request) -> dict[str, object]:
        """Score a food for an optional health profile."""
        state_container: AppContainer = request.app.state.container
        service = state_container.scoring_service
        version = body.model_version or service.default_version
        if version not in state_container.registry:
            logger.info("Rejected unknown model version %s", version)
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Unknown model version: {version}",
            )
        result = service.score(
            body.nutrients.to_domain(),
            body.context.to_domain(),
            body.profile.to_domain() if body.profile is not None else None,
            model_version=version,
            mode=body.scoring_mode,
        )
        return score_payload(result)

    return app
