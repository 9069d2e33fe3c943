"""Domain tool handlers."""
import logging

import httpx
from mcp.types import TextContent

from .. import formatters
from ..definitions import ToolDefinition
from ..schemas import CheckDomainAvailabilityParams, GetDomainPriceParams, ListDomainsParams
from ..upstream import optional_epoch_ms, request_json

logger = logging.getLogger("vercel-mcp.handlers.domains")


async def handle_check_domain_availability(
    params: CheckDomainAvailabilityParams,
    client: httpx.AsyncClient
) -> list[TextContent]:
    """Check whether a domain name can be purchased."""
    result = await request_json(
        client,
        "GET",
        "/v4/domains/status",
        params={"name": params.name, "teamId": params.teamId, "slug": params.slug},
    )
    logger.info(f"Successfully checked availability of {params.name}")
    return formatters.build_output("Domain availability", result)


async def handle_get_domain_price(params: GetDomainPriceParams, client: httpx.AsyncClient) -> list[TextContent]:
    result = await request_json(
        client,
        "GET",
        "/v4/domains/price",
        params={"name": params.name, "type": params.type, "teamId": params.teamId, "slug": params.slug},
    )
    logger.info(f"Successfully retrieved price for {params.name}")
    return formatters.build_output("Domain price", result)


async def handle_list_domains(params: ListDomainsParams, client: httpx.AsyncClient) -> list[TextContent]:
    result = await request_json(
        client,
        "GET",
        "/v5/domains",
        params={
            "limit": params.limit,
            "since": optional_epoch_ms(params.since),
            "until": optional_epoch_ms(params.until),
            "teamId": params.teamId,
            "slug": params.slug,
        },
    )
    domains = result.get("domains", []) if isinstance(result, dict) else []
    logger.info(f"Successfully listed {len(domains)} domains")
    return formatters.build_output("Domains", result)


TOOLS = [
    ToolDefinition(
        name="VERCEL_CHECK_DOMAIN_AVAILABILITY",
        description="Check if a domain name is available for purchase",
        schema=CheckDomainAvailabilityParams,
        handler=handle_check_domain_availability,
    ),
    ToolDefinition(
        name="VERCEL_GET_DOMAIN_PRICE",
        description="Check the price to purchase a domain",
        schema=GetDomainPriceParams,
        handler=handle_get_domain_price,
    ),
    ToolDefinition(
        name="VERCEL_LIST_DOMAINS",
        description="List all domains",
        schema=ListDomainsParams,
        handler=handle_list_domains,
    ),
]
