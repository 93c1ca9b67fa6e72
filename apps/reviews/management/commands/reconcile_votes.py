"""
Management command to repair review vote counters.

Recomputes each review's like/dislike counters from the stored votes and
overwrites the ones that drifted.

Usage:
    python manage.py reconcile_votes
    python manage.py reconcile_votes --dry-run
"""

from django.core.management.base import BaseCommand, CommandError
from apps.reviews.services import audit_vote_counts, reconcile_vote_counts


class Command(BaseCommand):
    help = 'Recompute review like/dislike counters from stored votes'

    def add_arguments(self, parser):
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Report drifted counters without changing them',
        )

    def handle(self, *args, **options):
        if options['dry_run']:
            report = audit_vote_counts()

            if not report.details:
                self.stdout.write(
                    self.style.SUCCESS(f'All {report.total_reviews} review(s) have consistent counters.')
                )
                return

            self.stdout.write(
                f'\nFound {report.inconsistent_reviews} of {report.total_reviews} review(s) with drifted counters:\n'
            )
            for drift in report.details:
                self.stdout.write(
                    f'  - {drift.review_id} | book {drift.book_id} | '
                    f'likes {drift.stored_likes} -> {drift.actual_likes} | '
                    f'dislikes {drift.stored_dislikes} -> {drift.actual_dislikes}'
                )
            self.stdout.write(
                self.style.WARNING('\n--dry-run mode: No changes made.')
            )
            return

        summary = reconcile_vote_counts()

        self.stdout.write(
            self.style.SUCCESS(
                f'Checked {summary.total_reviews} review(s), corrected {summary.updated_reviews}.'
            )
        )
        if summary.errors:
            raise CommandError(f'{summary.errors} review(s) could not be reconciled')
