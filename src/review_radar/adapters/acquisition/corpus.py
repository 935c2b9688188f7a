"""Canned review sentences used by the acquisition simulator."""

from review_radar.core.entities import Platform

PLATFORM_REVIEWS: dict[Platform, list[str]] = {
    Platform.AMAZON: [
        "Great product! Fast delivery and excellent packaging. The quality exceeded my expectations.",
        "Good value for money. The item arrived on time and matches the description perfectly.",
        "Disappointed with the quality. The material feels cheap and doesn't look like the pictures.",
        "Outstanding customer service. They resolved my issue quickly and professionally.",
        "The product is okay but delivery was delayed by 3 days. Packaging could be better.",
        "Amazing quality! I'm very satisfied with this purchase. Highly recommend to others.",
        "Poor quality control. The item had minor defects but still usable.",
        "Fast shipping and great customer support. Will definitely buy again from this seller.",
        "The product description was misleading. The actual size is smaller than expected.",
        "Excellent build quality and fantastic design. Worth every penny spent.",
        "Late delivery and poor packaging. The item was damaged during shipping.",
        "Good product but overpriced. You can find similar items for much less.",
        "Perfect fit and great material. The color matches exactly as shown in photos.",
        "Customer service was unhelpful when I tried to return the defective item.",
        "High quality product with premium feel. The packaging was also very impressive.",
    ],
    Platform.FLIPKART: [
        "Superb quality and fast delivery! The product exceeded my expectations completely.",
        "Good packaging and the item was delivered safely. Quality is as expected.",
        "The product quality is average. It's okay for the price but nothing special.",
        "Excellent customer service and quick resolution of my queries. Very professional.",
        "Delivery was on time but the product had some quality issues. Disappointed.",
        "Amazing value for money! The features and quality are beyond my expectations.",
        "Poor packaging led to damage during transit. Need to improve shipping methods.",
        "Great shopping experience overall. The product quality and service were excellent.",
        "The description didn't match the actual product. The size was different.",
        "Outstanding quality and design. I'm very happy with this purchase decision.",
        "Late delivery and no proper tracking updates. Communication needs improvement.",
        "Good product but the price keeps fluctuating. Should maintain stable pricing.",
        "Perfect product with excellent build quality. The delivery was also very fast.",
        "Return process was complicated and customer service wasn't very helpful.",
        "High-quality material and excellent craftsmanship. Definitely worth the money.",
    ],
    Platform.MEESHO: [
        "Beautiful saree with excellent fabric quality! The colors are vibrant and true to pictures.",
        "Good quality material and reasonable price. The blouse piece quality is also nice.",
        "The saree is gorgeous but delivery took longer than expected. Overall satisfied.",
        "Amazing design and comfortable fabric. Perfect for festivals and special occasions.",
        "Quality is decent for the price. The border work is beautiful and well-finished.",
        "Excellent packaging and fast delivery. The saree looks exactly like the photos.",
        "The fabric quality could be better. It's okay but not as premium as expected.",
        "Great customer support and easy return policy. The saree quality is also good.",
        "Beautiful colors and pattern but the material feels slightly rough. Average quality.",
        "Outstanding value for money! The embroidery work is intricate and beautiful.",
        "Delayed delivery and poor communication. The product quality is just average.",
        "Good quality saree with nice finish. The blouse material is also of good quality.",
        "Perfect traditional wear with authentic look. The craftsmanship is commendable.",
        "Return process was smooth and hassle-free. Customer service was very helpful.",
        "Excellent traditional design with modern touch. The fabric drape is perfect.",
    ],
    Platform.MYNTRA: [
        "Trendy design and excellent fabric quality! Perfect fit and comfortable to wear.",
        "Good collection of fashionable clothes. The quality matches the price point well.",
        "The dress looks different from the website photos. The color is not as vibrant.",
        "Great fashion choices and quick delivery. The sizing guide is also accurate.",
        "Quality is inconsistent across different brands. Some are excellent, others average.",
        "Amazing style and perfect for casual wear. The material is soft and comfortable.",
        "Poor quality control. The stitching was loose and the fit was awkward.",
        "Excellent customer service and easy exchanges. The fashion collection is trendy.",
        "The product quality varies by brand. Always check reviews before purchasing.",
        "Outstanding fashion sense and modern designs. Quality is generally very good.",
        "Delivery was delayed and packaging could be more eco-friendly. Product is good.",
        "Good variety of brands and styles. The app interface is user-friendly too.",
        "Perfect casual wear with great comfort. The material quality is impressive.",
        "Return policy is customer-friendly. The quality of branded items is excellent.",
        "High-quality fashion items with contemporary designs. Great shopping experience.",
    ],
    Platform.ZOMATO: [
        "Delicious food and timely delivery! The restaurant maintains excellent taste and quality.",
        "Good food quality but delivery was a bit delayed. Overall satisfactory experience.",
        "The taste was below expectations and the portion size was quite small for the price.",
        "Excellent service and hot food delivery. The packaging keeps the food fresh.",
        "Quality varies by restaurant. Some deliver amazing food while others are average.",
        "Amazing taste and authentic flavors! The delivery was quick and food was hot.",
        "Poor food quality and cold delivery. The restaurant needs to improve standards.",
        "Great customer support and quick refunds for issues. Food quality is generally good.",
        "The food arrived spilled and messy. Packaging needs significant improvement.",
        "Outstanding taste and restaurant-quality food delivered to home. Very satisfied.",
        "Late delivery and wrong order received. Customer service resolved it quickly though.",
        "Good variety of restaurants and cuisines. The food quality is usually consistent.",
        "Perfect food delivery service with hot and fresh meals. Highly recommended.",
        "The delivery person was courteous and the food arrived in perfect condition.",
        "High-quality ingredients and authentic taste. The packaging is also eco-friendly.",
    ],
}

PRODUCT_NAMES: dict[Platform, str] = {
    Platform.MEESHO: "Beautiful Traditional Saree",
    Platform.ZOMATO: "Restaurant Reviews",
}
DEFAULT_PRODUCT_NAME = "Sample Product"


def reviews_for(platform: Platform) -> list[str]:
    """Corpus for a platform; platforms without one reuse Amazon's."""
    return list(PLATFORM_REVIEWS.get(platform, PLATFORM_REVIEWS[Platform.AMAZON]))


def product_name_for(platform: Platform) -> str:
    return PRODUCT_NAMES.get(platform, DEFAULT_PRODUCT_NAME)


def build_review_text(platform: Platform, count: int) -> str:
    """Cycle the platform corpus to ``count`` sentences separated by blank lines."""
    corpus = reviews_for(platform)
    sentences = [corpus[i % len(corpus)] for i in range(max(count, 0))]
    return "\n\n".join(sentences)
