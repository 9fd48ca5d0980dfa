"""
Unit tests for the two-column page flow.

Small pages (300pt tall, 20pt margin) give a content area from y=20 to
y=250. With the three-words-per-line splitter a question "N. Q" with one
option "x" takes 12 (statement) + 5 + 12 (option) + 12 (block gap) = 41pt,
so five questions fill a column and leave 25pt, less than the 30pt guard.
"""

import random

import pytest

from simulado_toolkit.exporter.layout import (
    Column,
    LayoutConfig,
    LayoutError,
    LineSplitter,
    flow_questions,
)


@pytest.fixture
def small_config():
    return LayoutConfig(page_height=300, margin=20)


@pytest.fixture
def short_question(make_question):
    def _create():
        return make_question(statement="Q", options=("x",), correct_answer="x")
    return _create


def _questions_in(page, column):
    return sorted({p.question_index for p in page.lines_in(column)})


class TestColumnFlow:
    """Left column, then right column, then a new page."""

    def test_flow_when_ten_short_questions_then_both_columns_of_one_page(
        self, short_question, small_config, word_splitter
    ):
        # Arrange
        questions = [short_question() for _ in range(10)]
        
        # Act
        result = flow_questions(questions, 20, splitter=word_splitter, config=small_config)
        
        # Assert
        assert result.page_count == 1
        page = result.pages[0]
        assert _questions_in(page, Column.LEFT) == [0, 1, 2, 3, 4]
        assert _questions_in(page, Column.RIGHT) == [5, 6, 7, 8, 9]

    def test_flow_when_right_column_full_then_new_page_not_third_column(
        self, short_question, small_config, word_splitter
    ):
        """The eleventh question opens page 2 at the top of its left column."""
        questions = [short_question() for _ in range(11)]
        
        result = flow_questions(questions, 20, splitter=word_splitter, config=small_config)
        
        assert result.page_count == 2
        assert _questions_in(result.pages[0], Column.RIGHT) == [5, 6, 7, 8, 9]
        second = result.pages[1]
        assert _questions_in(second, Column.LEFT) == [10]
        assert second.lines_in(Column.LEFT)[0].y == 20
        assert second.lines_in(Column.RIGHT) == []
        assert result.question_page_map[10] == [1]

    def test_flow_when_questions_fit_then_positions_follow_block_spacing(
        self, short_question, small_config, word_splitter
    ):
        questions = [short_question() for _ in range(2)]
        
        result = flow_questions(questions, 20, splitter=word_splitter, config=small_config)
        
        assert [p.y for p in result.pages[0].placements] == [20, 37, 61, 78]
        assert [p.x for p in result.pages[0].placements] == [
            small_config.left_column_x,
            small_config.left_column_x + 10,
            small_config.left_column_x,
            small_config.left_column_x + 10,
        ]

    def test_flow_when_question_overflows_left_then_continues_right_at_its_cursor(
        self, make_question, small_config, word_splitter
    ):
        """21 statement lines: 19 fit the left column, 2 continue on the right."""
        # Arrange
        statement = " ".join(f"w{i}" for i in range(60))
        q = make_question(statement=statement, options=("x",), correct_answer="x")
        
        # Act
        result = flow_questions([q], 20, splitter=word_splitter, config=small_config)
        
        # Assert
        page = result.pages[0]
        left, right = page.lines_in(Column.LEFT), page.lines_in(Column.RIGHT)
        assert len(left) == 19
        assert [p.y for p in right] == [20, 32, 49]
        assert right[0].x == small_config.right_column_x
        assert right[0].text == "w56 w57 w58"
        assert result.question_page_map == {0: [0]}

    def test_flow_when_question_longer_than_page_then_spans_pages(
        self, make_question, small_config, word_splitter
    ):
        """67 lines: 19 + 19 on page 1, 19 + 10 on page 2."""
        statement = " ".join(f"w{i}" for i in range(200))
        q = make_question(statement=statement, options=("x",), correct_answer="x")
        
        result = flow_questions([q], 20, splitter=word_splitter, config=small_config)
        
        assert result.page_count == 2
        assert result.question_page_map == {0: [0, 1]}
        second = result.pages[1]
        assert len(second.lines_in(Column.LEFT)) == 19
        # 10 statement lines + the option
        assert len(second.lines_in(Column.RIGHT)) == 11

    def test_flow_when_too_little_room_then_skips_without_drawing(
        self, short_question, small_config, word_splitter
    ):
        """Starting with 25pt left in both columns goes straight to a new page."""
        result = flow_questions([short_question()], 225, splitter=word_splitter, config=small_config)
        
        assert result.page_count == 2
        assert result.pages[0].is_empty
        assert result.pages[1].lines_in(Column.LEFT)[0].y == small_config.content_top

    def test_flow_when_right_column_partly_used_then_resumes_below_it(
        self, make_question, short_question, small_config, word_splitter
    ):
        """Switching left -> right on the same page never resets the right cursor."""
        long_q = make_question(
            statement=" ".join(f"w{i}" for i in range(60)), options=("x",), correct_answer="x"
        )
        # long_q ends the right column at y=73; the next question continues there
        result = flow_questions(
            [long_q, short_question()], 20, splitter=word_splitter, config=small_config
        )
        
        right = result.pages[0].lines_in(Column.RIGHT)
        assert [p.question_index for p in right] == [0, 0, 0, 1, 1]
        assert right[3].y == 73

    def test_flow_when_line_taller_than_column_then_layout_error(self, short_question, word_splitter):
        """Content that can never be placed fails instead of looping."""
        config = LayoutConfig(page_height=300, margin=20, font_size=10)
        
        class NoRoomConfig:
            """Config proxy whose content area is smaller than one line."""
            def __getattr__(self, name):
                return getattr(config, name)
            line_height = 500
        
        with pytest.raises(LayoutError, match="does not fit an empty column"):
            flow_questions([short_question()], 20, splitter=word_splitter, config=NoRoomConfig())


class TestFlowProperties:
    """Properties that hold for any input, checked with the real splitter."""

    @pytest.fixture
    def varied_questions(self, make_question):
        rng = random.Random(42)
        vocabulary = (
            "análise função derivada integral limite sequência matriz vetor "
            "probabilidade estatística geometria triângulo área volume"
        ).split()
        
        def text(n):
            return " ".join(rng.choice(vocabulary) for _ in range(n))
        
        questions = []
        for _ in range(25):
            options = tuple(text(rng.randint(1, 40)) for _ in range(rng.randint(2, 5)))
            questions.append(
                make_question(
                    statement=text(rng.randint(5, 160)),
                    options=options,
                    correct_answer=options[0],
                )
            )
        return questions

    @pytest.fixture
    def flowed(self, varied_questions):
        config = LayoutConfig()
        result = flow_questions(
            varied_questions, 150, splitter=LineSplitter.from_config(config), config=config
        )
        return varied_questions, result, config

    def test_flow_when_reassembled_then_matches_input_text(self, flowed):
        """Drawn lines of each item, in order, rebuild label + text."""
        questions, result, _ = flowed
        
        for qi, q in enumerate(questions):
            lines = result.lines_for_question(qi)
            expected = [f"{qi + 1}. {q.statement}"] + [
                f"{chr(ord('a') + k)}) {opt}" for k, opt in enumerate(q.options)
            ]
            for item_index, text in enumerate(expected):
                drawn = " ".join(p.text for p in lines if p.item_index == item_index)
                assert drawn == " ".join(text.split())

    def test_flow_when_done_then_no_characters_lost(self, flowed):
        questions, result, _ = flowed
        
        drawn = sum(len(p.text.replace(" ", "")) for page in result.pages for p in page.placements)
        expected = sum(
            len(f"{qi + 1}.") + len(q.statement.replace(" ", ""))
            + sum(2 + len(opt.replace(" ", "")) for opt in q.options)
            for qi, q in enumerate(questions)
        )
        assert drawn == expected

    def test_flow_when_done_then_cursor_monotonic_per_column(self, flowed):
        _, result, _ = flowed
        
        for page in result.pages:
            for column in Column:
                ys = [p.y for p in page.lines_in(column)]
                assert ys == sorted(ys)
                assert len(ys) == len(set(ys))

    def test_flow_when_done_then_lines_stay_inside_content_area(self, flowed):
        _, result, config = flowed
        
        for page in result.pages:
            top = 150 if page.index == 0 else config.content_top
            for p in page.placements:
                assert p.y >= top
                assert p.y + config.line_height <= config.content_bottom + 1e-6

    def test_flow_when_done_then_pages_indexed_in_order(self, flowed):
        _, result, _ = flowed
        
        assert [p.index for p in result.pages] == list(range(result.page_count))
        assert result.page_count > 1
