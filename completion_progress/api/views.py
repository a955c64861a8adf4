from django.shortcuts import get_object_or_404
from rest_framework import permissions
from rest_framework.exceptions import NotFound
from rest_framework.response import Response
from rest_framework.views import APIView

from courses.models import CourseEnrollment

from ..models import ProgressBlock
from ..services import build_user_progress
from .serializers import UserProgressSerializer


class BlockProgressView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request, block_id, *args, **kwargs):
        block = get_object_or_404(ProgressBlock.objects.select_related("course"), pk=block_id)
        if not CourseEnrollment.objects.filter(course=block.course, user=request.user).exists():
            raise NotFound("Not enrolled in this course")
        progress = build_user_progress(block, request.user.id)
        return Response(UserProgressSerializer(progress).data)
