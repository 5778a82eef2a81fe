"""Built-in catalog of DNS echo providers, in priority order."""

from getip.core.models import Provider, QueryClass, QueryMethod

DEFAULT_DNS_PORT = 53

OPENDNS_V4 = Provider(
    name="opendns-v4",
    query_name="myip.opendns.com",
    servers=(
        "208.67.222.222",
        "208.67.220.220",
        "208.67.222.220",
        "208.67.220.222",
    ),
    port=DEFAULT_DNS_PORT,
    method=QueryMethod.A,
)

OPENDNS_V6 = Provider(
    name="opendns-v6",
    query_name="myip.opendns.com",
    servers=(
        "2620:0:ccc::2",
        "2620:0:ccd::2",
    ),
    port=DEFAULT_DNS_PORT,
    method=QueryMethod.AAAA,
)

# Google's authoritative servers (ns1..ns4.google.com)
GOOGLE_V4 = Provider(
    name="google-v4",
    query_name="o-o.myaddr.l.google.com",
    servers=(
        "216.239.32.10",
        "216.239.34.10",
        "216.239.36.10",
        "216.239.38.10",
    ),
    port=DEFAULT_DNS_PORT,
    method=QueryMethod.TXT,
)

GOOGLE_V6 = Provider(
    name="google-v6",
    query_name="o-o.myaddr.l.google.com",
    servers=(
        "2001:4860:4802:32::a",
        "2001:4860:4802:34::a",
        "2001:4860:4802:36::a",
        "2001:4860:4802:38::a",
    ),
    port=DEFAULT_DNS_PORT,
    method=QueryMethod.TXT,
)

# Cloudflare only answers whoami in the CHAOS class
CLOUDFLARE_V4 = Provider(
    name="cloudflare-v4",
    query_name="whoami.cloudflare",
    servers=(
        "1.1.1.1",
        "1.0.0.1",
    ),
    port=DEFAULT_DNS_PORT,
    method=QueryMethod.TXT,
    query_class=QueryClass.CH,
)

CLOUDFLARE_V6 = Provider(
    name="cloudflare-v6",
    query_name="whoami.cloudflare",
    servers=(
        "2606:4700:4700::1111",
        "2606:4700:4700::1001",
    ),
    port=DEFAULT_DNS_PORT,
    method=QueryMethod.TXT,
    query_class=QueryClass.CH,
)

ALL: tuple[Provider, ...] = (
    OPENDNS_V4,
    OPENDNS_V6,
    GOOGLE_V4,
    GOOGLE_V6,
    CLOUDFLARE_V4,
    CLOUDFLARE_V6,
)
