# src/transpiler/exceptions.py


class InvalidInput(TypeError):
    """
    Raised when a conversion argument breaks its type contract
    (e.g. markup that is not a string at all).

    Data-quality problems in the markup itself never raise.
    """
