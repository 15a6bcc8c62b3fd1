"""
Tests for the percent-encoding template processors.
"""
from __future__ import annotations

import functools
import unittest
from unittest.mock import Mock
from urllib.parse import SplitResult, quote_plus, urlsplit

from strtemplate import InvalidArgumentError, StringTemplate, UrlEncoderProcessor
from strtemplate.net import encode_as_str, encode_as_url

ID = "id/123"
URL = "https://example.org?q=1"


def _url_template(id_: str = ID, url: str = URL) -> StringTemplate:
    return StringTemplate.of(["https://host/path/", "?url=", ""], [id_, url])


def _expected(encoding: str) -> str:
    return "https://host/path/" + quote_plus(ID, encoding=encoding) + "?url=" + quote_plus(URL, encoding=encoding)


# --------------------------------------------------------------------------- #
#  1. Text results                                                            #
# --------------------------------------------------------------------------- #
class EncodeAsStrTests(unittest.TestCase):
    def test_utf8_default(self) -> None:
        result = encode_as_str().process(_url_template())
        self.assertEqual(_expected("utf-8"), result)
        self.assertNotIn(ID, result)
        self.assertNotIn(URL, result)

    def test_literal_escapes(self) -> None:
        result = encode_as_str()(_url_template())
        self.assertEqual("https://host/path/id%2F123?url=https%3A%2F%2Fexample.org%3Fq%3D1", result)

    def test_ascii(self) -> None:
        result = encode_as_str("US-ASCII").process(_url_template())
        self.assertEqual(_expected("ascii"), result)
        self.assertNotIn(ID, result)
        self.assertNotIn(URL, result)

    def test_form_encoding_rules(self) -> None:
        result = encode_as_str()(StringTemplate.of(["q=", ""], ["a b*c.d-e_f&g"]))
        self.assertEqual("q=a+b*c.d-e_f%26g", result)

    def test_encoding_changes_escapes(self) -> None:
        tpl = StringTemplate.of(["q=", ""], ["é"])
        self.assertEqual("q=%C3%A9", encode_as_str()(tpl))
        self.assertEqual("q=%E9", encode_as_str("latin-1")(tpl))

    def test_fragments_are_not_encoded(self) -> None:
        result = encode_as_str()(StringTemplate.of("https://host/a b?c=d"))
        self.assertEqual("https://host/a b?c=d", result)

    def test_non_text_values_are_stringified(self) -> None:
        result = encode_as_str()(StringTemplate.of(["n=", "&f=", ""], [13, 1.5]))
        self.assertEqual("n=13&f=1.5", result)

    def test_unencodable_value_becomes_question_mark(self) -> None:
        result = encode_as_str("ascii")(StringTemplate.of(["q=", ""], ["é"]))
        self.assertEqual("q=%3F", result)

    def test_unencodable_characters_replaced_individually(self) -> None:
        result = encode_as_str("ascii")(StringTemplate.of(["q=", ""], ["aé b€"]))
        self.assertEqual("q=a%3F+b%3F", result)

    def test_tilde_is_escaped(self) -> None:
        self.assertEqual("q=a%7Eb", encode_as_str()(StringTemplate.of(["q=", ""], ["a~b"])))
        self.assertEqual("q=%7E%7E", encode_as_str("ascii")(StringTemplate.of(["q=", ""], ["~~"])))

    def test_tilde_in_fragments_is_kept(self) -> None:
        result = encode_as_str()(StringTemplate.of(["/~user/", ""], ["~x"]))
        self.assertEqual("/~user/%7Ex", result)


# --------------------------------------------------------------------------- #
#  2. URL results                                                             #
# --------------------------------------------------------------------------- #
class EncodeAsUrlTests(unittest.TestCase):
    def test_utf8_default(self) -> None:
        result = encode_as_url().process(_url_template())
        self.assertIsInstance(result, SplitResult)
        self.assertEqual(urlsplit(_expected("utf-8")), result)
        self.assertNotIn(ID, result.path)
        self.assertNotIn(URL, result.query)
        self.assertNotIn("?", result.query)

    def test_ascii(self) -> None:
        result = encode_as_url("ascii").process(_url_template())
        self.assertEqual(urlsplit(_expected("ascii")), result)
        self.assertEqual("/path/id%2F123", result.path)
        self.assertEqual("host", result.netloc)

    def test_round_trip_text(self) -> None:
        result = encode_as_url()(_url_template())
        self.assertEqual(_expected("utf-8"), result.geturl())

    def test_parse_error_propagates(self) -> None:
        tpl = StringTemplate.of(["http://[", "/path"], ["::1"])
        with self.assertRaises(ValueError):
            encode_as_url()(tpl)


# --------------------------------------------------------------------------- #
#  3. Construction                                                            #
# --------------------------------------------------------------------------- #
class ConstructionTests(unittest.TestCase):
    def test_none_encoding_rejected(self) -> None:
        for factory in (encode_as_str, encode_as_url):
            with self.subTest(factory=factory.__name__):
                with self.assertRaises(InvalidArgumentError):
                    factory(None)

    def test_unknown_encoding_rejected(self) -> None:
        with self.assertRaises(LookupError):
            encode_as_str("no-such-codec")

    def test_encoding_is_normalized(self) -> None:
        self.assertEqual("utf-8", encode_as_str("UTF8").encoding)
        self.assertEqual("ascii", encode_as_url("US-ASCII").encoding)

    def test_processor_type_and_reuse(self) -> None:
        processor = encode_as_str()
        self.assertIsInstance(processor, UrlEncoderProcessor)
        self.assertEqual(processor(_url_template()), processor(_url_template()))
        self.assertEqual("x=a%2Fb", processor(StringTemplate.of(["x=", ""], ["a/b"])))
        self.assertIn("utf-8", repr(processor))

    def test_repr_with_nameless_finisher(self) -> None:
        finisher = functools.partial(str.strip)
        processor = UrlEncoderProcessor("utf-8", finisher)
        self.assertIn("functools.partial", repr(processor))
        self.assertEqual("a%2Fb", processor(StringTemplate.of([" ", " "], ["a/b"])))

    def test_logger_factory_supplies_logger(self) -> None:
        factory = Mock()
        factory.get_logger.return_value = Mock()
        encode_as_url(logger_factory=factory)
        factory.get_logger.assert_called_once_with("net.url_encoder")
        factory.get_logger.return_value.debug.assert_called_once()


if __name__ == "__main__":
    unittest.main()
