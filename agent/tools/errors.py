class DelegateError(RuntimeError):
    """An external API call did not produce a usable answer."""


class ImageSearchError(DelegateError):
    pass


class TextGenerationError(DelegateError):
    pass
