from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import SessionSerializer, SessionInputSerializer, SessionOpenStateSerializer
from .services import (
    create_session,
    get_session_by_id,
    list_sessions,
    update_session,
    delete_session,
    is_session_open,
    get_open_session,
    SessionNotFoundError,
    InvalidSessionDataError,
    InvalidSessionDatesError,
    InvalidCommissionError,
    NoOpenSessionError,
    AmbiguousOpenSessionError,
    SessionInUseError,
)

INVALID_INPUT_ERRORS = (InvalidSessionDataError, InvalidSessionDatesError, InvalidCommissionError)


class SessionViewSet(viewsets.ModelViewSet):
    """
    ViewSet for sale Session CRUD operations.

    list: Get all sessions (newest first)
    create: Create a session
    retrieve: Get a session
    update/partial_update: Merge the given fields
    destroy: Delete an unused session
    open: Get the session open right now
    is_open: Whether a session is open right now
    """

    serializer_class = SessionSerializer
    lookup_value_regex = '[0-9a-f-]{36}'

    def get_queryset(self):
        return list_sessions()

    def get_serializer_class(self):
        if self.action in ['create', 'update', 'partial_update']:
            return SessionInputSerializer
        return SessionSerializer

    def retrieve(self, request, *args, **kwargs):
        try:
            session = get_session_by_id(session_id=kwargs['pk'])
        except SessionNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(SessionSerializer(session).data)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            session = create_session(**serializer.validated_data)
        except INVALID_INPUT_ERRORS as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(SessionSerializer(session).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        try:
            session = update_session(session_id=kwargs['pk'], **serializer.validated_data)
        except SessionNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except INVALID_INPUT_ERRORS as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(SessionSerializer(session).data)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_session(session_id=kwargs['pk'])
        except SessionNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except SessionInUseError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(responses={200: SessionSerializer})
    @action(detail=False, methods=['get'])
    def open(self, request):
        """
        Get the session open right now.

        GET /api/sessions/open/
        """
        try:
            session = get_open_session()
        except NoOpenSessionError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except AmbiguousOpenSessionError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(SessionSerializer(session).data)

    @extend_schema(responses={200: SessionOpenStateSerializer})
    @action(detail=True, methods=['get'])
    def is_open(self, request, pk=None):
        """
        GET /api/sessions/{id}/is_open/
        """
        try:
            opened = is_session_open(session_id=pk)
        except SessionNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response({'id': pk, 'is_open': opened})
