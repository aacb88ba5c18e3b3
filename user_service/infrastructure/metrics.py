from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

http_requests_total = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status']
)

http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint']
)

users_registered_total = Counter('users_registered_total', 'Successfully registered users')
registration_conflicts_total = Counter(
    'registration_conflicts_total', 'Registrations rejected for a duplicate email'
)

db_queries_total = Counter('db_queries_total', 'Total database queries', ['operation'])

domain_events_published_total = Counter(
    'domain_events_published_total', 'Domain events handed to the publisher', ['event']
)


def metrics_endpoint() -> Response:
    """Prometheus scrape endpoint"""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
