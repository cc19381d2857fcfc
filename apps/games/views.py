from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema

from apps.sale_sessions.services import (
    SessionNotFoundError,
    NoOpenSessionError,
    AmbiguousOpenSessionError,
)
from apps.sellers.services import SellerNotFoundError
from .serializers import (
    GameDescriptionSerializer,
    GameDescriptionInputSerializer,
    DepositedGameSerializer,
    DepositedGameCreateSerializer,
    DepositedGameUpdateSerializer,
    OpenSessionDepositSerializer,
)
from .services import (
    create_game_description,
    get_game_description_by_id,
    list_game_descriptions,
    update_game_description,
    delete_game_description,
    create_deposited_game,
    create_deposited_game_in_open_session,
    list_deposited_games,
    get_deposited_game,
    list_deposited_games_by_seller,
    list_deposited_games_by_session,
    list_deposited_games_by_seller_and_session,
    update_deposited_game,
    delete_deposited_game,
    set_for_sale,
    remove_from_sale,
    mark_as_picked_up,
    GameDescriptionNotFoundError,
    InvalidGameDescriptionError,
    GameDescriptionInUseError,
    DepositedGameNotFoundError,
    InvalidDepositedGameError,
    SessionClosedError,
    GamePickedUpError,
    GameAlreadySoldError,
    DepositedGameInUseError,
)

UUID_PATTERN = '[0-9a-f-]{36}'

NOT_FOUND_ERRORS = (
    DepositedGameNotFoundError,
    GameDescriptionNotFoundError,
    SessionNotFoundError,
    SellerNotFoundError,
)
CONFLICT_ERRORS = (
    SessionClosedError,
    GamePickedUpError,
    GameAlreadySoldError,
    DepositedGameInUseError,
    NoOpenSessionError,
    AmbiguousOpenSessionError,
)


class GamesPagination(PageNumberPagination):
    """Custom pagination for catalog and deposited games."""
    page_size = 50
    page_size_query_param = 'page_size'
    max_page_size = 200


class GameDescriptionViewSet(viewsets.ModelViewSet):
    """
    ViewSet for the game catalog.

    list: Get all game descriptions (?search= filters name/publisher)
    create: Add a game description
    retrieve: Get a game description
    update/partial_update: Merge the given fields
    destroy: Delete a game description without deposits
    """

    serializer_class = GameDescriptionSerializer
    pagination_class = GamesPagination
    lookup_value_regex = UUID_PATTERN

    def get_queryset(self):
        return list_game_descriptions(search=self.request.query_params.get('search'))

    def get_serializer_class(self):
        if self.action in ['create', 'update', 'partial_update']:
            return GameDescriptionInputSerializer
        return GameDescriptionSerializer

    def retrieve(self, request, *args, **kwargs):
        try:
            game = get_game_description_by_id(game_description_id=kwargs['pk'])
        except GameDescriptionNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(GameDescriptionSerializer(game).data)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            game = create_game_description(**serializer.validated_data)
        except InvalidGameDescriptionError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(GameDescriptionSerializer(game).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        try:
            game = update_game_description(game_description_id=kwargs['pk'], **serializer.validated_data)
        except GameDescriptionNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidGameDescriptionError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(GameDescriptionSerializer(game).data)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_game_description(game_description_id=kwargs['pk'])
        except GameDescriptionNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except GameDescriptionInUseError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(status=status.HTTP_204_NO_CONTENT)


class DepositedGameViewSet(viewsets.ModelViewSet):
    """
    ViewSet for deposited games ("labels").

    list: Get all deposited games
    create: Deposit a game in an open session
    retrieve: Get a deposited game
    update/partial_update: Change price or references
    destroy: Delete a deposited game without transaction
    by_seller / by_session / by_seller_and_session: Scoped listings
    open_session: Deposit a game in the session open right now
    for_sale / remove_from_sale / picked_up: Lifecycle transitions
    """

    serializer_class = DepositedGameSerializer
    pagination_class = GamesPagination
    lookup_value_regex = UUID_PATTERN

    def get_queryset(self):
        return list_deposited_games()

    def get_serializer_class(self):
        if self.action == 'create':
            return DepositedGameCreateSerializer
        if self.action in ['update', 'partial_update']:
            return DepositedGameUpdateSerializer
        if self.action == 'open_session':
            return OpenSessionDepositSerializer
        return DepositedGameSerializer

    def _respond(self, operation, success_status=status.HTTP_200_OK, **kwargs):
        """Run a service call and map its domain errors to HTTP."""
        try:
            result = operation(**kwargs)
        except NOT_FOUND_ERRORS as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except CONFLICT_ERRORS as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)
        except InvalidDepositedGameError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        if result is None:
            return Response(status=status.HTTP_204_NO_CONTENT)

        many = not hasattr(result, 'pk')
        return Response(DepositedGameSerializer(result, many=many).data, status=success_status)

    def retrieve(self, request, *args, **kwargs):
        return self._respond(get_deposited_game, deposited_game_id=kwargs['pk'])

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        return self._respond(
            create_deposited_game,
            success_status=status.HTTP_201_CREATED,
            **serializer.validated_data
        )

    def update(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        return self._respond(
            update_deposited_game,
            deposited_game_id=kwargs['pk'],
            **serializer.validated_data
        )

    def destroy(self, request, *args, **kwargs):
        return self._respond(delete_deposited_game, deposited_game_id=kwargs['pk'])

    @extend_schema(responses={200: DepositedGameSerializer(many=True)})
    @action(detail=False, methods=['get'], url_path=rf'seller/(?P<seller_id>{UUID_PATTERN})')
    def by_seller(self, request, seller_id=None):
        """
        GET /api/deposited-games/seller/{seller_id}/
        """
        return self._respond(list_deposited_games_by_seller, seller_id=seller_id)

    @extend_schema(responses={200: DepositedGameSerializer(many=True)})
    @action(detail=False, methods=['get'], url_path=rf'session/(?P<session_id>{UUID_PATTERN})')
    def by_session(self, request, session_id=None):
        """
        GET /api/deposited-games/session/{session_id}/
        """
        return self._respond(list_deposited_games_by_session, session_id=session_id)

    @extend_schema(responses={200: DepositedGameSerializer(many=True)})
    @action(
        detail=False,
        methods=['get'],
        url_path=rf'seller/(?P<seller_id>{UUID_PATTERN})/session/(?P<session_id>{UUID_PATTERN})'
    )
    def by_seller_and_session(self, request, seller_id=None, session_id=None):
        """
        GET /api/deposited-games/seller/{seller_id}/session/{session_id}/
        """
        return self._respond(
            list_deposited_games_by_seller_and_session,
            seller_id=seller_id,
            session_id=session_id
        )

    @extend_schema(request=OpenSessionDepositSerializer, responses={201: DepositedGameSerializer})
    @action(detail=False, methods=['post'], url_path='open-session')
    def open_session(self, request):
        """
        Deposit a game in the session open right now.

        POST /api/deposited-games/open-session/
        Body: {"seller_id": "...", "game_description_id": "...", "sale_price": "20.00"}
        """
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        return self._respond(
            create_deposited_game_in_open_session,
            success_status=status.HTTP_201_CREATED,
            **serializer.validated_data
        )

    @extend_schema(request=None, responses={200: DepositedGameSerializer})
    @action(detail=True, methods=['post'])
    def for_sale(self, request, pk=None):
        """
        POST /api/deposited-games/{id}/for_sale/
        """
        return self._respond(set_for_sale, deposited_game_id=pk)

    @extend_schema(request=None, responses={200: DepositedGameSerializer})
    @action(detail=True, methods=['post'])
    def remove_from_sale(self, request, pk=None):
        """
        POST /api/deposited-games/{id}/remove_from_sale/
        """
        return self._respond(remove_from_sale, deposited_game_id=pk)

    @extend_schema(request=None, responses={200: DepositedGameSerializer})
    @action(detail=True, methods=['post'])
    def picked_up(self, request, pk=None):
        """
        POST /api/deposited-games/{id}/picked_up/
        """
        return self._respond(mark_as_picked_up, deposited_game_id=pk)
