from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from swapkit.api.deps import get_action_registry, get_swap_action_provider, get_wallet_provider
from swapkit.api.schemas.actions import ActionListResponse, ActionResponse, ActionResultResponse
from swapkit.application.actions.registry import ActionRegistry
from swapkit.application.actions.schemas import SwapActionInput
from swapkit.application.actions.swap_action_provider import SwapActionProvider
from swapkit.application.ports.wallet_provider_port import WalletProviderPort
from swapkit.domain.exceptions import (
    ApprovalFailedError,
    InvalidSwapRequestError,
    MetadataUnavailableError,
    NoRouteFoundError,
    RoutingUnavailableError,
    SwapSubmissionFailedError,
    UnsupportedNetworkError,
)

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/v1/actions", response_model=ActionListResponse)
def list_actions(
    provider: SwapActionProvider = Depends(get_swap_action_provider),
    registry: ActionRegistry = Depends(get_action_registry),
):
    return ActionListResponse(
        provider=provider.name,
        actions=[
            ActionResponse(
                name=action.name,
                description=action.description,
                input_schema=action.input_schema(),
            )
            for action in registry
        ],
    )


@router.post("/v1/actions/swap", response_model=ActionResultResponse)
def swap(
    req: SwapActionInput,
    registry: ActionRegistry = Depends(get_action_registry),
    wallet_provider: WalletProviderPort = Depends(get_wallet_provider),
):
    try:
        result = registry.invoke("swap", wallet_provider, req.model_dump(by_alias=True))
    except (InvalidSwapRequestError, MetadataUnavailableError) as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except UnsupportedNetworkError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except NoRouteFoundError as exc:
        logger.warning(
            "actions_router: no_route token_in=%s token_out=%s amount_in=%s",
            req.token_in,
            req.token_out,
            req.amount_in,
        )
        raise HTTPException(status_code=404, detail={"message": str(exc), "code": "no_route"}) from exc
    except RoutingUnavailableError as exc:
        logger.warning("actions_router: routing_unavailable detail=%s", exc)
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    except ApprovalFailedError as exc:
        logger.warning("actions_router: approval_failed token_in=%s detail=%s", req.token_in, exc)
        raise HTTPException(
            status_code=502, detail={"message": str(exc), "code": "approval_failed"}
        ) from exc
    except SwapSubmissionFailedError as exc:
        logger.warning("actions_router: submission_failed token_in=%s detail=%s", req.token_in, exc)
        raise HTTPException(
            status_code=502, detail={"message": str(exc), "code": "submission_failed"}
        ) from exc

    return ActionResultResponse(action="swap", result=result)
