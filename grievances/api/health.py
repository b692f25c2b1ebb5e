"""Health check endpoint."""

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework import status
from django.db import connection
import logging

logger = logging.getLogger(__name__)


@api_view(["GET"])
@permission_classes([AllowAny])
def health_check(request):
    """
    Report service and database health.

    Always answers 200 so load balancers can tell the process is up;
    ``dbOk`` says whether the database answered a trivial query.
    """
    db_ok = True
    try:
        with connection.cursor() as cursor:
            cursor.execute("select 1")
    except Exception as e:
        logger.error(f"Database health check failed: {str(e)}")
        db_ok = False

    return Response({"ok": True, "dbOk": db_ok}, status=status.HTTP_200_OK)
