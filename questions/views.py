# questions/views.py

from core.api import AdminApiView, ApiView, json_success
from core.exceptions import ValidationFailedError
from . import workflow


class QuestionSubmitView(ApiView):
    """إرسال سؤال جديد من صفحة الفتاوى"""

    def post(self, request):
        question = workflow.submit_question(self.get_json())
        return json_success(
            {'id': str(question.pk), 'status': question.status},
            status=201,
            message='Your question has been submitted successfully.',
        )


class QuestionListView(AdminApiView):

    def get(self, request):
        status = request.GET.get('status') or 'all'
        if status not in workflow.STATUS_FILTERS:
            raise ValidationFailedError({'status': [f'Unknown status: {status}']})
        questions = workflow.list_questions(status)
        return json_success(questions, count=len(questions))


class AnswerQuestionView(AdminApiView):

    def patch(self, request, question_id):
        question = workflow.answer_question(question_id, self.get_json())
        return json_success(question.as_dict(), message='Question answered successfully.')


class RejectQuestionView(AdminApiView):

    def patch(self, request, question_id):
        question = workflow.reject_question(question_id, self.get_json())
        return json_success(question.as_dict(), message='Question rejected successfully.')
