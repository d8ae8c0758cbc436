from rest_framework.pagination import PageNumberPagination


class SpacePagination(PageNumberPagination):
    """Page-number pagination for the listing directory."""
    page_size = 12                      # default items per page
    page_size_query_param = 'page_size' # allow ?page_size=
    max_page_size = 100                 # the map view asks for large pages
