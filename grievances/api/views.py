from django.http import JsonResponse
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from grievances.api.serializers import (
    DcdmLoginSerializer,
    OfficialLoginSerializer,
    StatusUpdateSerializer,
    SubmissionCreateSerializer,
    SubmissionSerializer,
)
from grievances.services.auth_service import AuthService
from grievances.services.submission_service import SubmissionService

# Failure kinds reported by SubmissionService mapped to HTTP status codes.
# A duplicate id is reported as a server error, not 409.
ERROR_STATUS = {
    "validation": status.HTTP_400_BAD_REQUEST,
    "duplicate": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "not_found": status.HTTP_404_NOT_FOUND,
    "database": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _error_response(result):
    return Response(
        {"ok": False, "error": result["message"]},
        status=ERROR_STATUS.get(result["error"], status.HTTP_500_INTERNAL_SERVER_ERROR),
    )


def _submission_or_null(submission):
    # JSONRenderer turns None into an empty body, so null is written out here.
    if submission is None:
        return JsonResponse(None, safe=False, status=status.HTTP_200_OK)
    return Response(SubmissionSerializer(submission).data, status=status.HTTP_200_OK)


def _first_error(errors):
    field, messages = next(iter(errors.items()))
    return f"{field}: {messages[0]}"


class SubmissionListCreateView(APIView):
    """
    File a submission or search existing ones.

    POST /api/submissions

    Request body:
    {
        "id": "TNK-001",
        "type": "complaint",
        "name": "Murugan",
        "phone": "+91 98765 43210",
        "taluk": "Tenkasi",
        "firka": "Ayikudi",
        "village": "Kadayanallur",
        "description": "Drainage overflow near the bus stand",
        "urgency": "high",
        "photos": []
    }

    GET /api/submissions?type=&status=&category=&department=&taluk=&firka=&village=&q=

    Returns at most 500 submissions, most recently updated first.
    """

    def get(self, request):
        """Search submissions."""
        service = SubmissionService()
        result = service.search(request.query_params)

        if not result["success"]:
            return _error_response(result)
        return Response(
            SubmissionSerializer(result["submissions"], many=True).data, status=status.HTTP_200_OK
        )

    def post(self, request):
        """File a new submission."""
        serializer = SubmissionCreateSerializer(data=request.data)

        if not serializer.is_valid():
            return Response(
                {"ok": False, "error": _first_error(serializer.errors)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        service = SubmissionService()
        result = service.file_submission(serializer.validated_data)

        if result["success"]:
            return Response({"ok": True, "id": result["id"]}, status=status.HTTP_200_OK)
        return _error_response(result)


class SubmissionLookupView(APIView):
    """
    Citizen tracking by id and phone number.

    GET /api/submissions/lookup?id=TNK-001&phone=9876543210

    Returns the submission, or null when the id and phone do not match.
    """

    def get(self, request):
        submission_id = request.query_params.get("id")
        phone = request.query_params.get("phone")
        if not submission_id or not phone:
            return Response(
                {"ok": False, "error": "id and phone required"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        service = SubmissionService()
        result = service.track(submission_id, phone)

        if not result["success"]:
            return _error_response(result)
        return _submission_or_null(result["submission"])


class SubmissionDetailView(APIView):
    """
    GET /api/submissions/{id}

    Returns the submission or null.
    """

    def get(self, request, submission_id):
        service = SubmissionService()
        result = service.get_submission(submission_id)

        if not result["success"]:
            return _error_response(result)
        return _submission_or_null(result["submission"])


class SubmissionStatusView(APIView):
    """
    Update the status of a submission (officials).

    POST /api/submissions/{id}/status

    Request body:
    {
        "status": "in-progress",
        "response": "Inspector assigned"
    }
    """

    def post(self, request, submission_id):
        serializer = StatusUpdateSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {"ok": False, "error": _first_error(serializer.errors)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        service = SubmissionService()
        result = service.update_status(
            submission_id,
            serializer.validated_data.get("status"),
            serializer.validated_data.get("response"),
        )

        if result["success"]:
            return Response({"ok": True}, status=status.HTTP_200_OK)
        return _error_response(result)


class DcdmLoginView(APIView):
    """
    DC/DM PIN login. Stateless: a success only confirms the PIN.

    POST /api/auth/dcdm
    {"pin": "..."}
    """

    def post(self, request):
        serializer = DcdmLoginSerializer(data=request.data)
        pin = serializer.validated_data.get("pin") if serializer.is_valid() else None

        service = AuthService()
        if service.check_pin(pin):
            return Response({"ok": True}, status=status.HTTP_200_OK)
        return Response(
            {"ok": False, "error": "Invalid PIN"}, status=status.HTTP_401_UNAUTHORIZED
        )


class OfficialLoginView(APIView):
    """
    Official username/password login. Stateless.

    POST /api/auth/official
    {"username": "...", "password": "..."}
    """

    def post(self, request):
        serializer = OfficialLoginSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {"ok": False, "error": "Missing"}, status=status.HTTP_400_BAD_REQUEST
            )

        service = AuthService()
        result = service.check_official(
            serializer.validated_data.get("username"), serializer.validated_data.get("password")
        )

        if result["success"]:
            return Response({"ok": True}, status=status.HTTP_200_OK)
        if result["error"] == "missing":
            return Response(
                {"ok": False, "error": "Missing"}, status=status.HTTP_400_BAD_REQUEST
            )
        if result["error"] == "invalid":
            return Response(
                {"ok": False, "error": "Invalid credentials"},
                status=status.HTTP_401_UNAUTHORIZED,
            )
        return _error_response(result)
