"""DNS record tool handlers."""
import logging

import httpx
from mcp.types import TextContent

from .. import formatters
from ..definitions import ToolDefinition
from ..schemas import CreateDnsRecordParams, ListDnsRecordsParams
from ..upstream import optional_epoch_ms, path_segment, request_json

logger = logging.getLogger("vercel-mcp.handlers.dns")

# Fields sent in the create body; team scoping goes in the query string
DNS_RECORD_BODY_FIELDS = {"domain", "type", "name", "value", "ttl", "comment"}


async def handle_create_dns_record(params: CreateDnsRecordParams, client: httpx.AsyncClient) -> list[TextContent]:
    """Create a DNS record for a domain.

    ttl and comment are only sent when supplied.
    """
    body = params.model_dump(include=DNS_RECORD_BODY_FIELDS, exclude_none=True)
    result = await request_json(
        client,
        "POST",
        f"/v2/domains/{path_segment(params.domain)}/records",
        params={"teamId": params.teamId, "slug": params.slug},
        json=body,
    )
    logger.info(f"Successfully created {params.type} record {params.name} on {params.domain}")
    return formatters.build_output("DNS record created", result)


async def handle_list_dns_records(params: ListDnsRecordsParams, client: httpx.AsyncClient) -> list[TextContent]:
    """List DNS records for a domain."""
    result = await request_json(
        client,
        "GET",
        f"/v4/domains/{path_segment(params.domain)}/records",
        params={
            "limit": params.limit,
            "since": optional_epoch_ms(params.since),
            "until": optional_epoch_ms(params.until),
            "teamId": params.teamId,
            "slug": params.slug,
        },
    )
    logger.info(f"Successfully listed DNS records for {params.domain}")
    return formatters.build_output("DNS records", result)


TOOLS = [
    ToolDefinition(
        name="VERCEL_CREATE_DNS_RECORD",
        description="Creates a DNS record for a domain",
        schema=CreateDnsRecordParams,
        handler=handle_create_dns_record,
    ),
    ToolDefinition(
        name="VERCEL_LIST_DNS_RECORDS",
        description="Retrieves a list of DNS records created for a domain name",
        schema=ListDnsRecordsParams,
        handler=handle_list_dns_records,
    ),
]
