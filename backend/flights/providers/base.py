class ProviderError(Exception):
    def __init__(self, message, status_code=502, details=None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details or {}


class FlightProvider:
    name = "base"

    def search_flights(self, criteria):
        """
        Returns a SearchResponse of canonical flights for the given SearchCriteria.
        """
        raise NotImplementedError
