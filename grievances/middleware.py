from django.utils.cache import add_never_cache_headers


class NoStoreMiddleware:
    """Mark every response as non-cacheable so officials always see fresh status."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        response = self.get_response(request)
        add_never_cache_headers(response)
        return response
