from models.restaurant import Restaurant
from models.user import User
from models.menu_management import Category, Dish
from models.table_management import Table
from models.parking_management import ParkingSlot
from models.booking import Booking
from models.order_management import Order, OrderItem

# Register all models
__all__ = ['Restaurant', 'User', 'Category', 'Dish', 'Table', 'ParkingSlot', 'Booking', 'Order', 'OrderItem']
