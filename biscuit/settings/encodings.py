from abc import ABC, abstractmethod


class Decoder(ABC):
    """
    Abstract base class for byte sequence decoders.

    Implementations of this class provide a strategy for decoding cookie
    strings received as bytes, used when a UnicodeDecodeError occurs during
    standard UTF-8 decoding. Subclasses must implement the `decode` method,
    which receives the bytes to decode and the original UnicodeDecodeError.
    """

    @abstractmethod
    def decode(self, value: bytes, decode_error: UnicodeDecodeError) -> str: ...


class NoopDecoder(Decoder):
    """
    A decoder implementation that does not attempt to decode input bytes.

    This class always raises the provided UnicodeDecodeError, so that the
    parser reports the input as a Utf8Error.
    """

    def decode(self, value: bytes, decode_error: UnicodeDecodeError) -> str:
        raise decode_error


class Latin1Decoder(Decoder):
    """
    A decoder that falls back to ISO-8859-1, which maps every byte to a
    character and therefore never fails. Some legacy servers send cookie
    values in this encoding.
    """

    def decode(self, value: bytes, decode_error: UnicodeDecodeError) -> str:
        return value.decode("latin-1")


class EncodingsSettings:
    """
    Manages the decoding strategy for cookie strings received as bytes.

    By default it uses NoopDecoder, which does not attempt to detect the
    encoding and re-raises the UnicodeDecodeError. The decoder can be replaced
    at runtime using the `use` method.
    """

    def __init__(self) -> None:
        self._decoder: Decoder = NoopDecoder()

    def use(self, decoder: Decoder) -> None:
        self._decoder = decoder

    @property
    def decoder(self) -> Decoder:
        return self._decoder

    def decode(self, value: bytes, decode_error: UnicodeDecodeError) -> str:
        return self._decoder.decode(value, decode_error)


encodings_settings = EncodingsSettings()
