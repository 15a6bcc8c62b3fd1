"""Network-flavoured template processors."""
from strtemplate.net.url_encoder import UrlEncoderProcessor, encode_as_str, encode_as_url

__all__ = ["UrlEncoderProcessor", "encode_as_str", "encode_as_url"]
