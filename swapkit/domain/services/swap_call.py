from __future__ import annotations

import logging

from swapkit.domain.entities.route import Route, SwapCall, SwapOptions
from swapkit.domain.exceptions import SwapSubmissionFailedError


logger = logging.getLogger(__name__)


def build_swap_call(route: Route, *, router_address: str, options: SwapOptions) -> SwapCall:
    """Final router call for a quoted route.

    The options must be the exact ones used to quote the route: the calldata
    embeds the minimum output and deadline derived from them.
    """
    if route.options != options:
        raise SwapSubmissionFailedError("Route was quoted with different swap options.")
    if not route.calldata or not route.calldata.startswith("0x"):
        raise SwapSubmissionFailedError("Route has no calldata.")

    if route.router_hint and route.router_hint.lower() != router_address.lower():
        logger.warning(
            "swap_call: router_mismatch quoted_to=%s configured=%s",
            route.router_hint,
            router_address,
        )

    return SwapCall(to=router_address, data=route.calldata, value=int(route.value))
