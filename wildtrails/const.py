VERSION = "0.3.0"

API_URL = "https://yosemite.org/wp-content/plugins/wildtrails/query.php"

# Query parameter values for the single endpoint
RESOURCE_TRAILHEADS = "trailheads"
RESOURCE_REPORT = "report"

# The API reports failures (bad cookie, rate limiting) through the envelope
# status rather than the HTTP status code.
STATUS_SUCCESS = "message"

# Report rows always carry the calendar date under this key; every other key
# is a trailhead id.
REPORT_DATE_KEY = "date"

# Dates further ahead than this many days are bound by the walk-up quota,
# nearer dates by the full capacity.
WALKUP_WINDOW_DAYS = 15
TIMEZONE = "America/Los_Angeles"

REQUEST_TIMEOUT = 30  # seconds, per request

COOKIE_ENV = "COOKIE"
WINDOW_DAYS_ENV = "WILDTRAILS_WINDOW_DAYS"
TIMEOUT_ENV = "WILDTRAILS_TIMEOUT"

# Browser-like headers sent with every request. The cookie is added per client.
BROWSER_HEADERS: dict[str, str] = {
    "accept": "*/*",
    "accept-language": "en-US,en;q=0.9",
    "cache-control": "no-cache",
    "content-type": "application/json",
    "authority": "yosemite.org",
    "sec-ch-ua": '"Chromium";v="88", "Google Chrome";v="88", ";Not A Brand";v="99"',
    "sec-ch-ua-mobile": "?0",
    "sec-fetch-dest": "empty",
    "sec-fetch-mode": "cors",
    "sec-fetch-site": "same-origin",
    "x-requested-with": "XMLHttpRequest",
    "pragma": "no-cache",
    "referer": "https://yosemite.org/planning-your-wilderness-permit/",
    "user-agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 11_1_0) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/88.0.4324.50 Safari/537.36"
    ),
}
