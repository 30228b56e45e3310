"""
Unit tests for page composition.
"""

import random

import pytest

from taskset_toolkit.builder.layout import (
    LayoutConfig,
    PageKind,
    TextAlign,
    TextMeasurer,
    compose_document,
    compose_task_page,
    compose_title_page,
    shuffle_task_pages,
)
from taskset_toolkit.core.models import Assignment, Task
from taskset_toolkit.expressions import InvalidListElement


@pytest.fixture
def config():
    return LayoutConfig()


@pytest.fixture
def measurer(config):
    return TextMeasurer.from_config(config)


class TestComposeTitlePage:
    """Tests for the title page."""
    
    def test_title_when_composed_then_centred_single_block(self, config, measurer):
        page = compose_title_page("Opgavesæt", config, measurer)
        
        assert page.index == 0
        assert page.kind is PageKind.TITLE
        assert len(page.blocks) == 1
        block = page.blocks[0]
        assert block.align is TextAlign.CENTER
        assert block.left == pytest.approx(config.page_width / 2)
        assert block.font_size == config.title_font_size
    
    def test_title_when_composed_then_one_line_below_margin(self, config, measurer):
        block = compose_title_page("T", config, measurer).blocks[0]
        assert block.top == pytest.approx(config.margin_y + 32 * 1.15)


class TestComposeTaskPage:
    """Tests for task pages."""
    
    def test_task_when_composed_then_blocks_in_order(self, config, measurer, rng):
        task = Task("Opgave 1", "Body text", ("A) \\[3,3]\\ + 1", "B) plain"))
        
        page = compose_task_page(task, 0, 1, config, measurer, rng)
        
        assert [b.text for b in page.blocks] == ["Opgave 1", "Body text", "A) 3 + 1", "B) plain"]
        assert page.kind is PageKind.TASK
        assert page.task_index == 0
        assert page.index == 1
    
    def test_task_when_composed_then_blocks_stacked_by_measured_height(self, config, measurer, rng):
        task = Task("Opgave 1", "Body\nsecond body line", ("Q1", "Q2 " * 80))
        
        title, body, q1, q2 = compose_task_page(task, 0, 1, config, measurer, rng).blocks
        
        assert title.top == pytest.approx(config.margin_y)
        assert body.top == pytest.approx(title.bottom)
        assert len(body.lines) == 2
        # One empty body line before the questions
        assert q1.top == pytest.approx(body.bottom + measurer.line_height(config.body_font_size))
        assert q2.top == pytest.approx(q1.bottom)
        assert len(q2.lines) > 1
    
    def test_task_when_composed_then_fonts_follow_config(self, config, measurer, rng):
        page = compose_task_page(Task("T", "B", ("Q",)), 0, 1, config, measurer, rng)
        sizes = [b.font_size for b in page.blocks]
        assert sizes == [config.task_title_font_size, config.body_font_size, config.body_font_size]
    
    def test_task_when_question_invalid_then_raises(self, config, measurer, rng):
        task = Task("T", "B", ("ok", "\\[1,x]\\"))
        with pytest.raises(InvalidListElement):
            compose_task_page(task, 0, 1, config, measurer, rng)


class TestComposeDocument:
    """Tests for whole-document composition."""
    
    def test_document_when_composed_then_title_then_tasks(self, sample_assignment, config, rng):
        plan = compose_document(sample_assignment, config, rng=rng)
        
        assert plan.page_count == 4
        assert plan.pages[0].is_title
        assert plan.task_order == (0, 1, 2)
        assert [p.index for p in plan.pages] == [0, 1, 2, 3]
        assert plan.title == "Opgavesæt"
    
    def test_document_when_composed_then_no_markers_left(self, sample_assignment, config, rng):
        plan = compose_document(sample_assignment, config, rng=rng)
        for page in plan.pages:
            assert "\\[" not in page.text
            assert "]\\" not in page.text
    
    def test_document_when_no_tasks_then_title_page_only(self, config, rng):
        plan = compose_document(Assignment("Empty"), config, rng=rng)
        assert plan.page_count == 1
        assert plan.task_order == ()
    
    def test_document_when_content_overflows_then_warns(self, config, rng, caplog):
        long_task = Task("Long", "Body", tuple(f"Question {i}" for i in range(80)))
        
        plan = compose_document(Assignment("Set", (long_task,)), config, rng=rng)
        
        assert plan.page_count == 2
        assert len(plan.warnings) == 1
        assert "overflows task 1 ('Long')" in plan.warnings[0]
        assert "overflows task 1" in caplog.text
    
    def test_document_when_content_fits_then_no_warnings(self, sample_assignment, config, rng):
        assert compose_document(sample_assignment, config, rng=rng).warnings == ()
    
    def test_document_when_shuffled_then_overflow_warning_still_names_task(self, config):
        short_task = Task("Short", "Body", ("Q",))
        long_task = Task("Long", "Body", tuple(f"Question {i}" for i in range(80)))
        assignment = Assignment("Set", (short_task, long_task))
        
        plan = shuffle_task_pages(compose_document(assignment, config, rng=random.Random(0)), random.Random(1))
        
        assert isinstance(plan.warnings, tuple)
        assert len(plan.warnings) == 1
        assert "task 2 ('Long')" in plan.warnings[0]
