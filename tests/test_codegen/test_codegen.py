"""Tests for deref evaluation, query strings, renderers and code generation."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from nestyle.codegen import (
    LeafKind,
    Mixin,
    Renderer,
    build_environment,
    classify_leaf,
    encode_url_component,
    evaluate,
    generate,
    query_string,
    render,
)
from nestyle.errors import BindError, InternalError
from nestyle.model import Apply, Leaf, Mix, Raw, Url, UrlParam, Var
from nestyle.stdlib import BLACK, Color


def _identity(url) -> str:
    return str(url)


def _env(**names):
    return build_environment(names)


# ---------------------------------------------------------------------------
# Leaf classification
# ---------------------------------------------------------------------------


class TestClassifyLeaf:
    @pytest.mark.parametrize(
        "name, kind",
        [
            ("0", LeafKind.NUMBER),
            ("255", LeafKind.NUMBER),
            ("Color", LeafKind.CONSTRUCTOR),
            ("RGB", LeafKind.CONSTRUCTOR),
            ("fg", LeafKind.VARIABLE),
            ("_private", LeafKind.VARIABLE),
            ("x1", LeafKind.VARIABLE),
            ("1x", LeafKind.VARIABLE),
        ],
    )
    def test_kinds(self, name, kind):
        assert classify_leaf(name) is kind

    def test_empty_name_is_internal_error(self):
        with pytest.raises(InternalError):
            classify_leaf("")


# ---------------------------------------------------------------------------
# Evaluation
# ---------------------------------------------------------------------------


class TestEvaluate:
    def test_variable(self):
        assert evaluate(Leaf("fg"), _env(fg="blue")) == "blue"

    def test_number(self):
        assert evaluate(Leaf("42"), _env()) == 42

    def test_builtins_available(self):
        assert evaluate(Leaf("black"), _env()) is BLACK

    def test_binding_shadows_builtin(self):
        assert evaluate(Leaf("black"), _env(black="#111")) == "#111"

    def test_keywords_shadow_context(self):
        env = build_environment({"fg": "context"}, {"fg": "keyword"})
        assert evaluate(Leaf("fg"), env) == "keyword"

    def test_application_chain_is_one_call(self):
        deref = Apply(Apply(Apply(Leaf("Color"), Leaf("17")), Leaf("17")), Leaf("17"))
        assert evaluate(deref, _env()) == Color(17, 17, 17)

    def test_curried_function_applied_one_argument_at_a_time(self):
        deref = Apply(Apply(Leaf("px"), Leaf("3")), Leaf("4"))
        env = _env(px=lambda a: lambda b: f"{a}px {b}px")
        assert evaluate(deref, env) == "3px 4px"

    def test_too_many_arguments_fail(self):
        deref = Apply(Apply(Leaf("one"), Leaf("1")), Leaf("2"))
        with pytest.raises(BindError) as exc_info:
            evaluate(deref, _env(one=lambda a: a))
        assert "failed" in exc_info.value.problems[0]

    def test_parenthesised_argument_evaluated_first(self):
        deref = Apply(Leaf("wrap"), Apply(Leaf("double"), Leaf("3")))
        env = _env(wrap=lambda x: f"[{x}]", double=lambda x: x * 2)
        assert evaluate(deref, env) == "[6]"

    def test_unbound_variable(self):
        with pytest.raises(BindError) as exc_info:
            evaluate(Leaf("missing"), _env())
        assert exc_info.value.problems == ["Unbound variable 'missing'"]

    def test_unbound_constructor(self):
        with pytest.raises(BindError) as exc_info:
            evaluate(Leaf("Missing"), _env())
        assert "constructor" in exc_info.value.problems[0]

    def test_all_unbound_names_reported(self):
        deref = Apply(Apply(Leaf("f"), Leaf("a")), Leaf("b"))
        with pytest.raises(BindError) as exc_info:
            evaluate(deref, _env())
        assert len(exc_info.value.problems) == 3

    def test_not_callable(self):
        with pytest.raises(BindError) as exc_info:
            evaluate(Apply(Leaf("fg"), Leaf("1")), _env(fg="blue"))
        assert "not callable" in exc_info.value.problems[0]

    def test_failing_call(self):
        with pytest.raises(BindError) as exc_info:
            evaluate(Apply(Leaf("Color"), Leaf("1")), _env())
        assert "failed" in exc_info.value.problems[0]


# ---------------------------------------------------------------------------
# Query strings
# ---------------------------------------------------------------------------


class TestUrlEncoding:
    def test_unreserved_unchanged(self):
        text = "ABCXYZabcxyz0189-_.~"
        assert encode_url_component(text) == text

    def test_space_is_plus(self):
        assert encode_url_component("a b") == "a+b"

    def test_percent(self):
        assert encode_url_component("%") == "%25"

    def test_reserved_characters(self):
        assert encode_url_component("a&b=c/d?") == "a%26b%3Dc%2Fd%3F"

    def test_plus_is_encoded(self):
        assert encode_url_component("+") == "%2B"

    def test_non_ascii_uses_utf8_bytes(self):
        assert encode_url_component("é") == "%C3%A9"

    def test_query_string(self):
        assert query_string([("q", "a b"), ("page", "2")]) == "?q=a+b&page=2"

    def test_empty_query_string(self):
        assert query_string([]) == ""


# ---------------------------------------------------------------------------
# Renderer
# ---------------------------------------------------------------------------


def _const(data: bytes) -> Renderer:
    return Renderer((lambda r: data,))


class TestRenderer:
    def test_empty(self):
        assert Renderer.empty()(_identity) == b""

    def test_identity(self):
        r = _const(b"x")
        assert (Renderer.empty() + r)(_identity) == b"x"
        assert (r + Renderer.empty())(_identity) == b"x"

    def test_associative(self):
        a, b, c = _const(b"a"), _const(b"b"), _const(b"c")
        assert ((a + b) + c)(_identity) == (a + (b + c))(_identity) == b"abc"

    def test_concat(self):
        assert Renderer.concat([_const(b"a"), _const(b"b")])(_identity) == b"ab"

    def test_add_rejects_other_types(self):
        with pytest.raises(TypeError):
            _const(b"a") + b"b"

    def test_render_helper(self):
        assert render(_identity, _const(b"a")) == b"a"

    def test_mixin_wraps_renderer(self):
        assert Mixin(_const(b"m"))(_identity) == b"m"


# ---------------------------------------------------------------------------
# Code generation
# ---------------------------------------------------------------------------


class TestGenerate:
    def test_raw(self):
        renderer = generate((Raw("a"), Raw("{}")), _env())
        assert len(renderer.emitters) == 1
        assert renderer(_identity) == b"a{}"

    def test_var_uses_style_text(self):
        renderer = generate((Raw("c:"), Var(Leaf("fg"))), _env(fg=BLACK))
        assert renderer(_identity) == b"c:#000000"

    def test_var_number(self):
        assert generate((Var(Leaf("w")),), _env(w=3))(_identity) == b"3"

    def test_url_uses_url_render(self):
        renderer = generate((Url(Leaf("home")),), _env(home="index"))
        assert renderer(lambda u: f"/{u}.html") == b"/index.html"

    def test_same_renderer_different_url_renders(self):
        renderer = generate((Url(Leaf("home")),), _env(home="index"))
        assert renderer(lambda u: "a/" + u) == b"a/index"
        assert renderer(lambda u: "b/" + u) == b"b/index"

    def test_url_params(self):
        value = ("search", [("q", "red shoes"), ("n", "10")])
        renderer = generate((UrlParam(Leaf("s")),), _env(s=value))
        assert renderer(lambda u: "/" + u) == b"/search?q=red+shoes&n=10"

    def test_url_params_empty(self):
        renderer = generate((UrlParam(Leaf("s")),), _env(s=("search", [])))
        assert renderer(lambda u: "/" + u) == b"/search"

    def test_url_params_bad_value(self):
        with pytest.raises(BindError) as exc_info:
            generate((UrlParam(Leaf("s")),), _env(s="search"))
        assert "pair" in exc_info.value.problems[0]

    def test_mixin_splice(self):
        mixin = Mixin(generate((Raw("color:"), Var(Leaf("c"))), _env(c="red")))
        renderer = generate((Raw("a{"), Mix(Leaf("m")), Raw("}")), _env(m=mixin))
        assert renderer(_identity) == b"a{color:red}"

    def test_mixin_receives_url_render(self):
        mixin = Mixin(generate((Url(Leaf("u")),), _env(u="img")))
        renderer = generate((Mix(Leaf("m")),), _env(m=mixin))
        assert renderer(lambda u: "/static/" + u) == b"/static/img"

    def test_non_mixin_rejected(self):
        with pytest.raises(BindError) as exc_info:
            generate((Mix(Leaf("m")),), _env(m="text"))
        assert "not a mixin" in exc_info.value.problems[0]

    def test_unrepresentable_var_rejected(self):
        with pytest.raises(BindError):
            generate((Var(Leaf("v")),), _env(v=object()))

    def test_problems_collected_once(self):
        contents = (Var(Leaf("a")), Raw(";"), Var(Leaf("b")), Var(Leaf("a")))
        with pytest.raises(BindError) as exc_info:
            generate(contents, _env())
        assert exc_info.value.problems == ["Unbound variable 'a'", "Unbound variable 'b'"]

    def test_non_ascii_output_is_utf8(self):
        renderer = generate((Raw("content:"), Var(Leaf("v"))), _env(v="→"))
        assert renderer(_identity) == "content:→".encode("utf-8")

    def test_concurrent_renders(self):
        renderer = generate((Raw("a:"), Url(Leaf("u"))), _env(u="x"))
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(lambda i: renderer(lambda u: f"{u}{i}"), range(20)))
        assert results == [f"a:x{i}".encode() for i in range(20)]
