from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema

from apps.clients.services import ClientNotFoundError
from apps.games.services import DepositedGameNotFoundError
from apps.sale_sessions.services import SessionNotFoundError
from apps.sellers.services import SellerNotFoundError
from .serializers import (
    TransactionSerializer,
    TransactionCreateSerializer,
    TransactionUpdateSerializer,
)
from .services import (
    create_transaction,
    create_multiple_transactions,
    list_transactions,
    get_transaction,
    list_transactions_by_session,
    list_transactions_by_client,
    list_transactions_by_seller,
    update_transaction,
    delete_transaction,
    TransactionNotFoundError,
    InvalidTransactionDataError,
    GameNotAvailableError,
    SessionNotOpenError,
    LabelMismatchError,
    FrozenSaleFieldError,
)

UUID_PATTERN = '[0-9a-f-]{36}'

NOT_FOUND_ERRORS = (
    TransactionNotFoundError,
    DepositedGameNotFoundError,
    SessionNotFoundError,
    SellerNotFoundError,
    ClientNotFoundError,
)
CONFLICT_ERRORS = (
    GameNotAvailableError,
    SessionNotOpenError,
    LabelMismatchError,
    FrozenSaleFieldError,
)


class TransactionPagination(PageNumberPagination):
    """Custom pagination for transactions."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class TransactionViewSet(viewsets.ModelViewSet):
    """
    ViewSet for sales. Every route requires an authenticated manager.

    list: Get all transactions
    create: Sell a deposited game
    retrieve: Get a transaction
    update/partial_update: Correct client or date
    destroy: Delete a transaction record
    bulk: Record several sales at once
    by_session / by_client / by_seller: Scoped listings
    """

    serializer_class = TransactionSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = TransactionPagination
    lookup_value_regex = UUID_PATTERN

    def get_queryset(self):
        return list_transactions()

    def get_serializer_class(self):
        if self.action in ['create', 'bulk']:
            return TransactionCreateSerializer
        if self.action in ['update', 'partial_update']:
            return TransactionUpdateSerializer
        return TransactionSerializer

    def _respond(self, operation, success_status=status.HTTP_200_OK, **kwargs):
        """Run a service call and map its domain errors to HTTP."""
        try:
            result = operation(**kwargs)
        except NOT_FOUND_ERRORS as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except CONFLICT_ERRORS as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)
        except InvalidTransactionDataError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        if result is None:
            return Response(status=status.HTTP_204_NO_CONTENT)

        many = not hasattr(result, 'pk')
        return Response(TransactionSerializer(result, many=many).data, status=success_status)

    def retrieve(self, request, *args, **kwargs):
        return self._respond(get_transaction, transaction_id=kwargs['pk'])

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        return self._respond(
            create_transaction,
            success_status=status.HTTP_201_CREATED,
            manager=request.user,
            **serializer.validated_data
        )

    def update(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        return self._respond(
            update_transaction,
            transaction_id=kwargs['pk'],
            **serializer.validated_data
        )

    def destroy(self, request, *args, **kwargs):
        return self._respond(delete_transaction, transaction_id=kwargs['pk'])

    @extend_schema(request=TransactionCreateSerializer(many=True), responses={201: TransactionSerializer(many=True)})
    @action(detail=False, methods=['post'])
    def bulk(self, request):
        """
        Record several sales in one all-or-nothing batch.

        POST /api/transactions/bulk/
        Body: [{"label_id": "...", "session_id": "...", "seller_id": "...", "client_id": "..."}, ...]
        """
        serializer = TransactionCreateSerializer(data=request.data, many=True, allow_empty=False)
        serializer.is_valid(raise_exception=True)

        return self._respond(
            create_multiple_transactions,
            success_status=status.HTTP_201_CREATED,
            items=serializer.validated_data,
            manager=request.user
        )

    @extend_schema(responses={200: TransactionSerializer(many=True)})
    @action(detail=False, methods=['get'], url_path=rf'by-session/(?P<session_id>{UUID_PATTERN})')
    def by_session(self, request, session_id=None):
        """
        GET /api/transactions/by-session/{session_id}/
        """
        return self._respond(list_transactions_by_session, session_id=session_id)

    @extend_schema(responses={200: TransactionSerializer(many=True)})
    @action(detail=False, methods=['get'], url_path=rf'client/(?P<client_id>{UUID_PATTERN})')
    def by_client(self, request, client_id=None):
        """
        GET /api/transactions/client/{client_id}/
        """
        return self._respond(list_transactions_by_client, client_id=client_id)

    @extend_schema(responses={200: TransactionSerializer(many=True)})
    @action(detail=False, methods=['get'], url_path=rf'seller/(?P<seller_id>{UUID_PATTERN})')
    def by_seller(self, request, seller_id=None):
        """
        GET /api/transactions/seller/{seller_id}/
        """
        return self._respond(list_transactions_by_seller, seller_id=seller_id)
