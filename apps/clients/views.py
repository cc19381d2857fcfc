from rest_framework import viewsets, status
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination

from .serializers import ClientSerializer, ClientInputSerializer
from .services import (
    create_client,
    get_client_by_id,
    list_clients,
    update_client,
    delete_client,
    ClientNotFoundError,
    InvalidClientDataError,
    ClientInUseError,
)


class ClientPagination(PageNumberPagination):
    """Custom pagination for clients."""
    page_size = 50
    page_size_query_param = 'page_size'
    max_page_size = 200


class ClientViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Client CRUD operations.

    Views are thin HTTP handlers; services hold the logic.
    """

    serializer_class = ClientSerializer
    pagination_class = ClientPagination
    lookup_value_regex = '[0-9a-f-]{36}'

    def get_queryset(self):
        return list_clients(search=self.request.query_params.get('search'))

    def get_serializer_class(self):
        if self.action in ['create', 'update', 'partial_update']:
            return ClientInputSerializer
        return ClientSerializer

    def retrieve(self, request, *args, **kwargs):
        try:
            client = get_client_by_id(client_id=kwargs['pk'])
        except ClientNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(ClientSerializer(client).data)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            client = create_client(**serializer.validated_data)
        except InvalidClientDataError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(ClientSerializer(client).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        try:
            client = update_client(client_id=kwargs['pk'], **serializer.validated_data)
        except ClientNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidClientDataError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(ClientSerializer(client).data)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_client(client_id=kwargs['pk'])
        except ClientNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except ClientInUseError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(status=status.HTTP_204_NO_CONTENT)
