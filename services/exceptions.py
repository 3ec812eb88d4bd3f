#services/exceptions.py


class HotelSearchError(Exception):
    pass




class SearchValidationError(HotelSearchError):
    pass




class ProviderError(HotelSearchError):
    pass
