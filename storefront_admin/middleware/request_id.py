"""
Request ID and timing middleware for request tracing and logging
"""
import time
import uuid


class RequestIdMiddleware:
    """
    WSGI middleware that tags each response with X-Request-ID and
    X-Response-Time (milliseconds until the response started)
    """

    def __init__(self, app):
        self.app = app

    def __call__(self, environ, start_response):
        # Generate or extract request ID
        request_id = environ.get('HTTP_X_REQUEST_ID') or str(uuid.uuid4())
        started = time.perf_counter()

        # Store in environ
        environ['request_id'] = request_id

        def custom_start_response(status, headers, exc_info=None):
            elapsed_ms = int((time.perf_counter() - started) * 1000)
            headers.append(('X-Request-ID', request_id))
            headers.append(('X-Response-Time', f'{elapsed_ms}ms'))
            return start_response(status, headers, exc_info)

        return self.app(environ, custom_start_response)
