"""
Orders blueprint
Order search and payment status changes
"""
import logging

from flask import Blueprint, jsonify
from flask_login import current_user, login_required
from sqlalchemy import String, cast
from sqlalchemy.exc import SQLAlchemyError

from storefront_admin import db
from storefront_admin.extensions import CONTENT_API, limiter
from storefront_admin.models import Order
from storefront_admin.models.order import PAYMENT_STATUSES
from storefront_admin.monitoring import track_error, track_event
from storefront_admin.sanitize import sanitize_order_filters
from storefront_admin.utils import contains_pattern, error_response, get_json_body, get_request_id
from storefront_admin.validation import clean_uuid

logger = logging.getLogger(__name__)

orders_bp = Blueprint('orders', __name__)

MAX_RESULTS = 1000


@orders_bp.route('/search', methods=['POST'])
@limiter.limit(CONTENT_API)
@login_required
def search_orders():
    """
    Search orders, newest first

    POST /api/dashboard/orders/search
    Body: {
        "order_client": "jane",
        "order_payment_status": ["paid", "unpaid"]
    }
    """
    data = get_json_body()
    if data is None:
        return error_response('Invalid JSON in request body', 400)

    filters = sanitize_order_filters(data)

    query = Order.query
    if 'order_client' in filters:
        query = query.filter(cast(Order.order_client, String).ilike(
            contains_pattern(filters['order_client']), escape='\\'))
    if filters.get('order_payment_status'):
        query = query.filter(Order.order_payment_status.in_(filters['order_payment_status']))

    try:
        total = query.count()
        orders = query.order_by(Order.order_created.desc()).limit(MAX_RESULTS).all()
    except SQLAlchemyError as e:
        logger.exception('Failed to search orders')
        track_error(e, 'search_orders', {'request_id': get_request_id()})
        return error_response('An error occurred while filtering orders. Please try again.', 500)

    logger.info('Order search returned %d of %d orders', len(orders), total)
    track_event('database', 'orders_filtered', {'count': len(orders), 'total': total})

    return jsonify({
        'success': True,
        'orders': [order.to_dict() for order in orders],
        'totalOrders': total,
    }), 200


@orders_bp.route('/<order_id>/status', methods=['PATCH'])
@limiter.limit(CONTENT_API)
@login_required
def update_order_status(order_id):
    """
    Change an order's payment status

    PATCH /api/dashboard/orders/<order_id>/status
    Body: {"status": "paid"}
    """
    cleaned_id = clean_uuid(order_id)
    if cleaned_id is None:
        return error_response('Invalid order ID format', 400)

    data = get_json_body()
    if data is None:
        return error_response('Invalid JSON in request body', 400)

    new_status = data.get('status')
    if new_status not in PAYMENT_STATUSES:
        logger.warning('Invalid payment status %r for order %s', new_status, cleaned_id)
        return error_response('Validation failed', 400, {
            'status': f"Status must be one of: {', '.join(PAYMENT_STATUSES)}"
        })

    order = db.session.get(Order, cleaned_id)
    if order is None:
        return error_response('Order not found', 404)

    old_status = order.order_payment_status
    order.set_status(new_status)

    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Failed to update status of order %s', cleaned_id)
        track_error(e, 'update_order_status', {'order_id': cleaned_id, 'status': new_status})
        return error_response('Failed to update order payment status', 500)

    logger.info('Order %s status %s -> %s by %s', cleaned_id, old_status, new_status, current_user.id)
    track_event('database', 'order_status_updated', {
        'order_id': cleaned_id,
        'old_status': old_status,
        'new_status': new_status,
    })

    return jsonify({
        'success': True,
        'message': 'Order status updated successfully',
        'order': order.to_dict(),
        'oldStatus': old_status,
    }), 200
