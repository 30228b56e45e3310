"""
Tests for document assembly and multi-copy builds.
"""

import json
import random

import pytest
from pypdf import PdfReader

from taskset_toolkit.builder import (
    BuildError,
    BuilderConfig,
    DocumentOptions,
    assemble,
    build_copies,
)
from taskset_toolkit.builder.controller import _slugify
from taskset_toolkit.core.models import Assignment, Task
from taskset_toolkit.expressions import ExpressionError, InvalidRange


def _question_texts(plan) -> list[str]:
    """Question block texts of every task page, in assignment order."""
    pages = sorted(plan.task_pages, key=lambda p: p.task_index)
    return [b.text for p in pages for b in p.blocks[2:]]


@pytest.fixture
def broken_assignment(sample_assignment):
    bad = Task("Broken", "Body", ("ok", "\\[N5..3]\\"))
    return Assignment(sample_assignment.title, sample_assignment.tasks + (bad,))


class TestAssemble:
    """Tests for assemble()."""
    
    def test_assemble_when_defaults_then_original_order(self, sample_assignment, rng):
        plan = assemble(sample_assignment, rng=rng)
        
        assert plan.page_count == 4
        assert plan.pages[0].is_title
        assert plan.task_order == (0, 1, 2)
    
    def test_assemble_when_shuffle_then_title_first_and_all_tasks_present(self, sample_assignment):
        options = DocumentOptions(shuffle=True)
        for seed in range(30):
            plan = assemble(sample_assignment, options, random.Random(seed))
            assert plan.pages[0].is_title
            assert "Opgavesæt" in plan.pages[0].text
            assert sorted(plan.task_order) == [0, 1, 2]
    
    def test_assemble_when_shuffle_repeated_then_orders_vary(self, sample_assignment):
        options = DocumentOptions(shuffle=True)
        orders = {assemble(sample_assignment, options, random.Random(s)).task_order for s in range(40)}
        assert len(orders) > 1
    
    def test_assemble_when_repeated_then_values_rerolled(self, sample_assignment):
        texts = {
            tuple(_question_texts(assemble(sample_assignment, rng=random.Random(s))))
            for s in range(10)
        }
        assert len(texts) > 1
    
    def test_assemble_when_same_seed_then_identical_copy(self, sample_assignment):
        options = DocumentOptions(shuffle=True)
        first = assemble(sample_assignment, options, random.Random(42))
        second = assemble(sample_assignment, options, random.Random(42))
        
        assert first.task_order == second.task_order
        assert _question_texts(first) == _question_texts(second)
    
    def test_assemble_when_shuffled_then_rendered_questions_stay_with_their_task(self, sample_assignment):
        plan = assemble(sample_assignment, DocumentOptions(shuffle=True), random.Random(5))
        for page in plan.task_pages:
            assert page.blocks[0].text == sample_assignment.tasks[page.task_index].title
    
    def test_assemble_when_question_invalid_then_raises_expression_error(self, broken_assignment, rng):
        with pytest.raises(InvalidRange):
            assemble(broken_assignment, DocumentOptions(shuffle=True), rng)
    
    def test_assemble_when_margin_changed_then_blocks_move(self, sample_assignment):
        narrow = assemble(sample_assignment, DocumentOptions(margin=(15, 25)), random.Random(1))
        wide = assemble(sample_assignment, DocumentOptions(margin=(40, 25)), random.Random(1))
        assert wide.pages[1].blocks[0].left > narrow.pages[1].blocks[0].left


class TestBuildCopies:
    """Tests for build_copies()."""
    
    def test_build_when_copies_requested_then_one_pdf_each(self, sample_assignment, tmp_path):
        config = BuilderConfig(output_dir=tmp_path, copies=3, shuffle=True, seed=7)
        
        result = build_copies(sample_assignment, config)
        
        assert [c.pdf_path.name for c in result.copies] == [
            "Opgavesaet_01.pdf", "Opgavesaet_02.pdf", "Opgavesaet_03.pdf",
        ]
        for copy in result.copies:
            assert copy.pdf_path.exists()
            assert copy.pdf_path.parent == result.output_dir
            assert len(PdfReader(copy.pdf_path).pages) == copy.page_count == 4
    
    def test_build_when_completed_then_output_inside_base_dir(self, sample_assignment, tmp_path):
        result = build_copies(sample_assignment, BuilderConfig(output_dir=tmp_path))
        
        assert result.output_dir.parent == tmp_path
        assert result.output_dir.name.endswith("__Opgavesaet")
    
    def test_build_when_metadata_enabled_then_manifest_written(self, sample_assignment, tmp_path):
        config = BuilderConfig(output_dir=tmp_path, copies=2, shuffle=True, seed=3)
        
        result = build_copies(sample_assignment, config)
        
        data = json.loads((result.output_dir / "build_metadata.json").read_text(encoding="utf-8"))
        assert data["title"] == "Opgavesæt"
        assert data["copies"] == 2
        assert data["seed"] == 3
        assert [m["task_order"] for m in data["manifest"]] == [list(c.task_order) for c in result.copies]
    
    def test_build_when_metadata_disabled_then_no_json(self, sample_assignment, tmp_path):
        config = BuilderConfig(output_dir=tmp_path, write_metadata=False)
        result = build_copies(sample_assignment, config)
        assert not (result.output_dir / "build_metadata.json").exists()
    
    def test_build_when_seeded_then_reproducible_orders(self, sample_assignment, tmp_path):
        config = BuilderConfig(output_dir=tmp_path, copies=4, shuffle=True, seed=99)
        
        first = build_copies(sample_assignment, config)
        second = build_copies(sample_assignment, config)
        
        assert [c.task_order for c in first.copies] == [c.task_order for c in second.copies]
        assert first.output_dir != second.output_dir
    
    def test_build_when_file_stem_given_then_used_for_names(self, sample_assignment, tmp_path):
        config = BuilderConfig(output_dir=tmp_path, file_stem="Test 3B")
        result = build_copies(sample_assignment, config)
        assert result.copies[0].pdf_path.name == "Test-3B_01.pdf"
    
    def test_build_when_expression_fails_then_build_error_and_no_files(self, broken_assignment, tmp_path):
        output_dir = tmp_path / "out"
        config = BuilderConfig(output_dir=output_dir, copies=2)
        
        with pytest.raises(BuildError, match="copy 1") as exc_info:
            build_copies(broken_assignment, config)
        
        assert isinstance(exc_info.value.__cause__, ExpressionError)
        assert not output_dir.exists()


class TestSlugify:
    """Tests for file name stems."""
    
    @pytest.mark.parametrize("text,expected", [
        ("Opgavesæt", "Opgavesaet"),
        ("Opgavesæt: Ligninger 2", "Opgavesaet-Ligninger-2"),
        ("Øvelse/Åben", "Oevelse-Aaben"),
        ("???", "assignment"),
    ])
    def test_slugify_when_title_given_then_file_safe(self, text, expected):
        assert _slugify(text) == expected
