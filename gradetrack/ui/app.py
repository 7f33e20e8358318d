from __future__ import annotations

import logging

import flet as ft

from gradetrack.config.settings import settings
from gradetrack.domain.errors import GradeTrackError
from gradetrack.domain.logic.grading import EMPTY_GRADE
from gradetrack.state.app_state import AppState, GpaSummary

logger = logging.getLogger(__name__)


class GradeTrackApp:
    def __init__(self, page: ft.Page, state: AppState | None = None) -> None:
        self.page = page
        self.page.title = "Academic Performance Tracker"
        self.page.scroll = ft.ScrollMode.AUTO
        self.state = state or AppState(semester_label=settings.semester_label)
        self.status = ft.Text(color=ft.Colors.RED)

        self.gpa_text = ft.Text(size=56, weight=ft.FontWeight.BOLD, color=ft.Colors.WHITE)
        self.total_subjects_text = ft.Text(size=22, weight=ft.FontWeight.BOLD, color=ft.Colors.WHITE)
        self.total_credits_text = ft.Text(size=22, weight=ft.FontWeight.BOLD, color=ft.Colors.WHITE)
        self.graded_text = ft.Text(size=22, weight=ft.FontWeight.BOLD, color=ft.Colors.WHITE)

    def run(self) -> None:
        self.page.add(
            ft.Column(
                [
                    self.header(),
                    self.semester_selector(),
                    self.subjects_table(),
                    self.status,
                    ft.Row([self.gpa_card(), self.overview_card()], wrap=True),
                    ft.Text("Select grades for all subjects to calculate your semester GPA", color=ft.Colors.BLUE_GREY_600),
                ],
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                spacing=20,
            )
        )
        self.render_summary(self.state.summary())

    def header(self) -> ft.Control:
        return ft.Column(
            [
                ft.Row(
                    [
                        ft.Icon(ft.Icons.SCHOOL, color=ft.Colors.BLUE_600, size=40),
                        ft.Text("Academic Performance Tracker", size=32, weight=ft.FontWeight.BOLD),
                    ],
                    alignment=ft.MainAxisAlignment.CENTER,
                ),
                ft.Text("Monitor your academic progress in real-time", color=ft.Colors.BLUE_GREY_600),
            ],
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        )

    def semester_selector(self) -> ft.Control:
        # Only one semester is modelled.
        label = self.state.semester_label
        return ft.Dropdown(
            label="Select Semester",
            options=[ft.dropdown.Option(label)],
            value=label,
            disabled=True,
            width=260,
        )

    def grade_dropdown(self, subject_code: str) -> ft.Dropdown:
        options = [ft.dropdown.Option(EMPTY_GRADE, "Select Grade")]
        options += [ft.dropdown.Option(label, text) for label, text in self.state.grade_options()]
        return ft.Dropdown(
            options=options,
            value=self.state.engine.grade_label(subject_code),
            width=180,
            on_change=lambda e, code=subject_code: self.handle_grade_change(code, e.control.value),
        )

    def subjects_table(self) -> ft.Control:
        rows = [
            ft.Row(
                [
                    ft.Text("Subject Code", width=160, weight=ft.FontWeight.BOLD),
                    ft.Text("Credits", width=80, weight=ft.FontWeight.BOLD, text_align=ft.TextAlign.CENTER),
                    ft.Text("Grade", width=180, weight=ft.FontWeight.BOLD),
                ]
            ),
            ft.Divider(),
        ]
        for subject in self.state.engine.registry.subjects:
            rows.append(
                ft.Row(
                    [
                        ft.Text(subject.code, width=160, weight=ft.FontWeight.W_600),
                        ft.Text(str(subject.credits), width=80, text_align=ft.TextAlign.CENTER, color=ft.Colors.BLUE_700),
                        self.grade_dropdown(subject.code),
                    ]
                )
            )
        return ft.Container(content=ft.Column(rows), padding=16, border_radius=12, bgcolor=ft.Colors.WHITE, width=480)

    def gpa_card(self) -> ft.Control:
        return ft.Container(
            content=ft.Column(
                [
                    ft.Row(
                        [
                            ft.Icon(ft.Icons.TRENDING_UP, color=ft.Colors.WHITE),
                            ft.Text("CURRENT GPA", weight=ft.FontWeight.BOLD, color=ft.Colors.WHITE),
                        ]
                    ),
                    self.gpa_text,
                    ft.Text("Out of 10.00", color=ft.Colors.BLUE_GREY_200),
                ]
            ),
            padding=20,
            border_radius=12,
            bgcolor=ft.Colors.BLUE_GREY_800,
            width=260,
        )

    def overview_card(self) -> ft.Control:
        def line(caption: str, value: ft.Text) -> ft.Row:
            return ft.Row(
                [ft.Text(caption, color=ft.Colors.BLUE_100), value],
                alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
            )

        return ft.Container(
            content=ft.Column(
                [
                    ft.Text("SEMESTER OVERVIEW", weight=ft.FontWeight.BOLD, color=ft.Colors.WHITE),
                    line("Total Subjects:", self.total_subjects_text),
                    line("Total Credits:", self.total_credits_text),
                    line("Graded Subjects:", self.graded_text),
                ]
            ),
            padding=20,
            border_radius=12,
            bgcolor=ft.Colors.BLUE_700,
            width=260,
        )

    def handle_grade_change(self, subject_code: str, grade_label: str | None) -> None:
        try:
            summary = self.state.select_grade(subject_code, grade_label)
            self.status.value = ""
        except GradeTrackError as exc:
            logger.warning(f"Rejected grade selection for {subject_code}: {exc}")
            self.status.value = str(exc)
            summary = self.state.summary()
        self.render_summary(summary)

    def render_summary(self, summary: GpaSummary) -> None:
        self.gpa_text.value = summary.gpa
        self.total_subjects_text.value = str(summary.total_subjects)
        self.total_credits_text.value = str(summary.total_credits)
        self.graded_text.value = str(summary.graded_subjects)
        self.page.update()


def main(page: ft.Page) -> None:
    GradeTrackApp(page).run()
