from rest_framework import viewsets, status
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination

from .serializers import SellerSerializer, SellerInputSerializer
from .services import (
    create_seller,
    get_seller_by_id,
    list_sellers,
    update_seller,
    delete_seller,
    SellerNotFoundError,
    InvalidSellerDataError,
    SellerInUseError,
)


class SellerPagination(PageNumberPagination):
    """Custom pagination for sellers."""
    page_size = 50
    page_size_query_param = 'page_size'
    max_page_size = 200


class SellerViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Seller CRUD operations.

    list: Get all sellers (?search= filters name/email)
    create: Register a seller
    retrieve: Get a seller with current balance
    update/partial_update: Merge the given fields
    destroy: Delete a seller without games or sales
    """

    serializer_class = SellerSerializer
    pagination_class = SellerPagination
    lookup_value_regex = '[0-9a-f-]{36}'

    def get_queryset(self):
        return list_sellers(search=self.request.query_params.get('search'))

    def get_serializer_class(self):
        if self.action in ['create', 'update', 'partial_update']:
            return SellerInputSerializer
        return SellerSerializer

    def retrieve(self, request, *args, **kwargs):
        try:
            seller = get_seller_by_id(seller_id=kwargs['pk'])
        except SellerNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(SellerSerializer(seller).data)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            seller = create_seller(**serializer.validated_data)
        except InvalidSellerDataError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(SellerSerializer(seller).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        # PUT and PATCH both merge: unspecified fields keep their value
        serializer = self.get_serializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        try:
            seller = update_seller(seller_id=kwargs['pk'], **serializer.validated_data)
        except SellerNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidSellerDataError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(SellerSerializer(seller).data)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_seller(seller_id=kwargs['pk'])
        except SellerNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except SellerInUseError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(status=status.HTTP_204_NO_CONTENT)
