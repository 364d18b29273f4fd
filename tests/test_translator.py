"""End-to-end tests for the ChessNLP facade."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from chessnlp import (
    ChessNLP,
    ConfigurationError,
    EnPassantError,
    Language,
    MoveSyntaxError,
    TranslatorSettings,
)
from chessnlp.core.enums import Direction


class TestConstruction:
    def test_no_arguments(self) -> None:
        nlp = ChessNLP()
        assert nlp.language == Language.ENGLISH

    def test_aliases_exposed(self) -> None:
        nlp = ChessNLP(aliases={"knight": ["night"]})
        assert nlp.aliases.resolve("knight") == ("knight", "night")

    def test_language_by_name_or_code(self) -> None:
        assert ChessNLP(language="Russian").language == Language.RUSSIAN
        assert ChessNLP(language="ru").language == Language.RUSSIAN

    def test_unknown_language_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="Unsupported language"):
            ChessNLP(language="Klingon")

    def test_bad_alias_fails_construction(self) -> None:
        with pytest.raises(ConfigurationError):
            ChessNLP(aliases={"queen": [""]})

    def test_from_settings(self) -> None:
        nlp = ChessNLP.from_settings(TranslatorSettings(language="ru", aliases={"knight": ["конек"]}))
        assert nlp.language == Language.RUSSIAN
        assert nlp.text_to_san("конек f3") == "Nf3"

    def test_from_options_mapping(self) -> None:
        nlp = ChessNLP.from_settings({"aliases": {"queen": ["kween"]}})
        assert nlp.text_to_san("kween to a8") == "Qa8"

    def test_from_options_rejects_unknown_key(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown translator option"):
            ChessNLP.from_settings({"alias": {}})


class TestTextToSan:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("bishop to D7", "Bd7"),
            ("rook A1", "Ra1"),
            ("queen captures H8", "Qxh8"),
            ("king takes F5", "Kxf5"),
            ("knight a to B4", "Nab4"),
            ("Bishop 2 h8", "B2h8"),
            ("Queen C2D3", "Qc2d3"),
            ("F captures G4 en passant", "fxg3"),
            ("a takes b5 en passant", "axb4"),
            ("E5", "e5"),
            ("h take G6", "hxg6"),
            ("c8 promote to Queen", "c8=Q"),
            ("F captures E8 promote to knight", "fxe8=N"),
            ("rook takes b7 mate", "Rxb7#"),
            ("Bishop A c3 check", "Bac3+"),
            ("E7 check", "e7+"),
            ("castle kingside", "O-O"),
            ("castle Queenside", "O-O-O"),
            ("castle King Side", "O-O"),
            ("castle queen-side", "O-O-O"),
            ("Black Resigns", "1-0"),
            ("white resigns", "0-1"),
            ("rook a takes a3", "Raxa3"),
            ("queen c 2 d 3", "Qc2d3"),
            ("e one", "e1"),
            ("bishop captures A two", "Bxa2"),
            ("queen to b three check", "Qb3+"),
            ("knight take hfour checkmate", "Nxh4#"),
            ("Cfive", "c5"),
            ("f six", "f6"),
            ("king dseven", "Kd7"),
            ("rook six f eight", "R6f8"),
            ("queen a-4", "Qa4"),
        ],
    )
    def test_text_to_san(self, nlp: ChessNLP, text: str, expected: str) -> None:
        assert nlp.text_to_san(text) == expected

    def test_invalid_en_passant(self, nlp: ChessNLP) -> None:
        with pytest.raises(EnPassantError, match="Invalid en passant capture") as info:
            nlp.text_to_san("g takes h7 en passant")
        assert info.value.text == "g takes h7 en passant"
        assert info.value.rank == "7"

    def test_en_passant_error_is_not_syntax_error(self, nlp: ChessNLP) -> None:
        with pytest.raises(EnPassantError) as info:
            nlp.text_to_san("g takes h3 en passant")
        assert not isinstance(info.value, MoveSyntaxError)

    def test_unparseable(self, nlp: ChessNLP) -> None:
        with pytest.raises(MoveSyntaxError, match="Invalid move: foo") as info:
            nlp.text_to_san("foo")
        assert info.value.text == "foo"
        assert info.value.direction == Direction.TEXT_TO_SAN

    def test_errors_are_value_errors(self, nlp: ChessNLP) -> None:
        with pytest.raises(ValueError):
            nlp.text_to_san("knight to i9")


class TestUserAliases:
    @pytest.mark.parametrize(
        ("target", "aliases", "text", "expected"),
        [
            ("king", ["foo", "bar"], "bar takes c7", "Kxc7"),
            ("queen", ["kween"], "KwEen to A8", "Qa8"),
            ("rook", ["Brooke", "brook", "hook"], "brook A d6", "Rad6"),
            ("bishop", ["foo", "bar"], "foo 2 e4", "B2e4"),
            ("knight", ["night", "nite"], "Night captures b2 mate", "Nxb2#"),
            ("a", ["alpha"], "ALPHA takes b4", "axb4"),
            ("b", ["beta", "bravo"], "rook bravo to beta7", "Rbb7"),
            ("c", ["charlie"], "charlie6", "c6"),
            ("d", ["delta"], "Queen captures DELTA1 checkmate", "Qxd1#"),
            ("e", ["echo"], "Echo5", "e5"),
            ("f", ["foxtrot"], "knight foxtrot 3", "Nf3"),
            ("g", ["golf"], "rook golf takes golf2", "Rgxg2"),
            ("h", ["hotel", "hey"], "rook hey takes hotel 6", "Rhxh6"),
            ("1", ["i", "won"], "rook won takes a i", "R1xa1"),
            ("2", ["too", "to"], "e too", "e2"),
            ("3", ["iii"], "knight to fiii", "Nf3"),
            ("4", ["force"], "bishop g force", "Bg4"),
            ("5", ["v"], "Knight V to b7", "N5b7"),
            ("6", ["vi"], "hvi", "h6"),
            ("7", ["vii"], "Queen to c vii check", "Qc7+"),
            ("8", ["ate"], "king b ate", "Kb8"),
        ],
    )
    def test_alias(self, target: str, aliases: list[str], text: str, expected: str) -> None:
        nlp = ChessNLP(aliases={target: aliases})
        assert nlp.text_to_san(text) == expected

    def test_aliases_in_any_order(self) -> None:
        nlp = ChessNLP(aliases={4: ["for", "fore"]})
        assert nlp.text_to_san("knight to h fore") == "Nh4"
        assert nlp.text_to_san("knight to h for") == "Nh4"

    def test_duplicate_of_default_still_accepted(self) -> None:
        nlp = ChessNLP(aliases={"king": ["King", "king"], "e": ["E"]})
        assert nlp.text_to_san("king e2") == "Ke2"

    def test_keyword_aliases(self) -> None:
        nlp = ChessNLP(aliases={"capture": ["eats"], "kingside": ["short side"]})
        assert nlp.text_to_san("queen eats d5") == "Qxd5"
        assert nlp.text_to_san("castle short side") == "O-O"

    def test_aliases_do_not_leak_between_instances(self) -> None:
        ChessNLP(aliases={"queen": ["kween"]})
        with pytest.raises(MoveSyntaxError):
            ChessNLP().text_to_san("kween to a8")


class TestSanToText:
    @pytest.mark.parametrize(
        ("san", "expected"),
        [
            ("e4", "e4"),
            ("hxg2", "h captures g2"),
            ("axb8=Q", "a captures b8 promote to queen"),
            ("cxd1=Q+", "c captures d1 promote to queen check"),
            ("d8=Q#", "d8 promote to queen checkmate"),
            ("f1=N", "f1 promote to knight"),
            ("Kg2", "king to g2"),
            ("Qh7", "queen to h7"),
            ("Rab7", "rook a to b7"),
            ("Bc4", "bishop to c4"),
            ("N6e7", "knight 6 to e7"),
            ("O-O", "castle kingside"),
            ("O-O-O", "castle queenside"),
            ("0-1", "black wins"),
            ("1-0", "white wins"),
            ("1/2-1/2", "draw"),
        ],
    )
    def test_san_to_text(self, nlp: ChessNLP, san: str, expected: str) -> None:
        assert nlp.san_to_text(san) == expected

    def test_unparseable(self, nlp: ChessNLP) -> None:
        with pytest.raises(MoveSyntaxError, match="Invalid notation: foo") as info:
            nlp.san_to_text("foo")
        assert info.value.direction == Direction.SAN_TO_TEXT

    def test_idempotent(self, nlp: ChessNLP) -> None:
        for san in ("e4", "Nbxd2+", "O-O-O#", "exd8=R", "1/2-1/2"):
            assert nlp.san_to_text(san) == nlp.san_to_text(san)

    def test_phrases_parse_back(self, nlp: ChessNLP) -> None:
        for san in ("e4", "hxg2", "axb8=Q", "Kg2", "Rab7", "N6e7", "O-O-O", "1-0", "0-1", "1/2-1/2"):
            assert nlp.text_to_san(nlp.san_to_text(san)) == san

    def test_promotions_phrase_back(self, nlp: ChessNLP) -> None:
        for piece in ("queen", "rook", "bishop", "knight"):
            san = nlp.text_to_san(f"e8 promote to {piece}")
            assert nlp.text_to_san(nlp.san_to_text(san)) == san
        with pytest.raises(MoveSyntaxError):
            nlp.text_to_san("e8 promote to king")

    def test_aliases_do_not_change_phrasing(self) -> None:
        nlp = ChessNLP(aliases={"knight": ["night"]})
        assert nlp.san_to_text("Nf3") == "knight to f3"


class TestMethodAliases:
    def test_to_san(self) -> None:
        assert ChessNLP.to_san is ChessNLP.text_to_san

    def test_from_san(self) -> None:
        assert ChessNLP.from_san is ChessNLP.san_to_text


class TestRussian:
    def test_text_to_san(self, nlp_ru: ChessNLP) -> None:
        assert nlp_ru.text_to_san("слон на d7") == "Bd7"
        assert nlp_ru.text_to_san("пешка е4") == "e4"
        assert nlp_ru.text_to_san("конь б берёт д2 шах") == "Nbxd2+"

    def test_san_to_text(self, nlp_ru: ChessNLP) -> None:
        assert nlp_ru.san_to_text("Kg2") == "король на g2"
        assert nlp_ru.san_to_text("hxg2") == "h берёт g2"
        assert nlp_ru.san_to_text("axb8=Q") == "a берёт b8 превращение в ферзя"
        assert nlp_ru.san_to_text("O-O") == "короткая рокировка"
        assert nlp_ru.san_to_text("1-0") == "белые выигрывают"
        assert nlp_ru.san_to_text("1/2-1/2") == "ничья"

    def test_phrases_parse_back(self, nlp_ru: ChessNLP) -> None:
        for san in ("exd5", "f8=N#", "Qh4+", "O-O-O", "0-1", "1/2-1/2"):
            assert nlp_ru.text_to_san(nlp_ru.san_to_text(san)) == san

    def test_localized_errors(self, nlp_ru: ChessNLP) -> None:
        with pytest.raises(MoveSyntaxError, match="Неверный ход: foo"):
            nlp_ru.text_to_san("foo")
        with pytest.raises(MoveSyntaxError, match="Неверная нотация: foo"):
            nlp_ru.san_to_text("foo")
        with pytest.raises(EnPassantError, match="Неверное взятие на проходе"):
            nlp_ru.text_to_san("g берёт h7 на проходе")


class TestConcurrency:
    def test_shared_instance_across_threads(self, nlp: ChessNLP) -> None:
        inputs = ["bishop to D7", "castle queenside", "a takes b5 en passant", "e one"] * 10
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(nlp.text_to_san, inputs))
        assert results == ["Bd7", "O-O-O", "axb4", "e1"] * 10
