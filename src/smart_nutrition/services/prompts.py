"""Prompt builders for plan generation and chat."""

from string import Template

from smart_nutrition.domain.chats import ChatContext
from smart_nutrition.domain.goals import resolve_budget, resolve_goal
from smart_nutrition.domain.plans import PlanRequest

NO_SPECIAL_REQUEST = "Không có yêu cầu đặc biệt"

MEAL_PLAN_TEMPLATE = Template("""\
Bạn là chuyên gia dinh dưỡng người Việt Nam. Hãy tạo một kế hoạch ăn uống $days ngày cho mục tiêu $goal_label.

YÊU CẦU:
- Mục tiêu: $goal_description
- Tổng calo mỗi ngày: $calories kcal (±50 kcal)
- Ngân sách: $budget_label ($budget_description)
- $budget_guidance$notes_clause
- Sử dụng món ăn Việt Nam phổ biến, dễ nấu
- Cân đối dinh dưỡng: protein, carbs, chất béo lành mạnh
- Mỗi ngày có đúng 4 bữa: Sáng, Trưa, Tối, Snack

ĐỊNH DẠNG JSON (BẮT BUỘC):
Trả về CHÍNH XÁC theo format JSON này, KHÔNG thêm text nào khác:

{
  "days": [
    {
      "day": 1,
      "totalCalories": $calories,
      "meals": [
        {
          "type": "Sáng",
          "time": "07:00",
          "foods": [
            {
              "name": "Phở bò",
              "portion": "1 tô",
              "calories": 350,
              "protein": 20,
              "carbs": 50,
              "fat": 8,
              "recipe": {
                "ingredients": [
                  "200g bánh phở",
                  "100g thịt bò",
                  "1 lít nước dùng xương",
                  "Hành, ngò, giá",
                  "Gia vị: muối, nước mắm, tiêu"
                ],
                "instructions": [
                  "Ninh xương bò 2-3 tiếng để có nước dùng trong",
                  "Trụng bánh phở qua nước sôi",
                  "Thái thịt bò mỏng, chần sơ",
                  "Cho bánh phở vào tô, xếp thịt bò lên trên",
                  "Chan nước dùng nóng, thêm hành ngò giá"
                ]
              }
            }
          ],
          "totalCalories": 350,
          "notes": "Ăn nhẹ nhàng, dễ tiêu"
        },
        {
          "type": "Trưa",
          "time": "12:00",
          "foods": [
            {
              "name": "Cá hồi nướng",
              "portion": "100g",
              "calories": 200,
              "protein": 25,
              "carbs": 0,
              "fat": 12,
              "recipe": {
                "ingredients": [
                  "100g phi lê cá hồi",
                  "1 muỗng cà phê dầu ô liu",
                  "Muối, tiêu, tỏi băm",
                  "Chanh"
                ],
                "instructions": [
                  "Ướp cá với muối, tiêu, tỏi băm 15 phút",
                  "Phết dầu ô liu lên mặt cá",
                  "Nướng lò 180°C trong 12-15 phút",
                  "Rưới chanh trước khi ăn"
                ]
              }
            }
          ],
          "totalCalories": 200,
          "notes": "Bữa chính, đầy đủ dinh dưỡng"
        },
        {
          "type": "Tối",
          "time": "18:30",
          "foods": [
            {
              "name": "Canh chua cá",
              "portion": "1 tô",
              "calories": 150,
              "protein": 15,
              "carbs": 12,
              "fat": 5,
              "recipe": {
                "ingredients": [
                  "150g cá basa",
                  "2 quả cà chua",
                  "100g dứa",
                  "Rau ngổ, giá, me chua"
                ],
                "instructions": [
                  "Nấu nước với me chua",
                  "Cho cà chua, dứa vào nấu",
                  "Thêm cá, nêm nếm vừa ăn",
                  "Cho rau ngổ, giá vào rồi tắt bếp"
                ]
              }
            }
          ],
          "totalCalories": 150,
          "notes": "Bữa tối nhẹ nhàng"
        },
        {
          "type": "Snack",
          "time": "15:00",
          "foods": [
            {
              "name": "Chuối",
              "portion": "1 quả",
              "calories": 100,
              "protein": 1,
              "carbs": 25,
              "fat": 0,
              "recipe": {
                "ingredients": ["1 quả chuối chín"],
                "instructions": ["Bóc vỏ và ăn trực tiếp"]
              }
            }
          ],
          "totalCalories": 100,
          "notes": "Bổ sung năng lượng"
        }
      ]
    }
  ],
  "summary": {
    "goal": "$goal_label",
    "averageCalories": $calories,
    "budget": "$budget_label",
    "tips": [
      "Uống đủ 2-2.5 lít nước mỗi ngày",
      "Ăn chậm, nhai kỹ",
      "Tránh ăn muộn sau 20:00"
    ]
  }
}

LƯU Ý QUAN TRỌNG:
1. Chỉ trả về JSON, KHÔNG có markdown, KHÔNG có ```json
2. Tổng calories mỗi ngày phải nằm trong khoảng $calories ± 50 kcal
3. Mỗi ngày có đúng 4 bữa: Sáng (breakfast), Trưa (lunch), Tối (dinner), Snack (snack)
4. Món ăn phải là món Việt thực tế, dễ làm
5. Tạo đủ $days ngày với đa dạng món ăn
6. **BẮT BUỘC**: Mỗi món ăn PHẢI có trường "recipe" với:
   - "ingredients": Danh sách nguyên liệu cụ thể (khối lượng, số lượng)
   - "instructions": Các bước nấu chi tiết, dễ hiểu
7. **TUÂN THỦ NGÂN SÁCH**: $budget_guidance
8. **CHÚ Ý GHI CHÚ NGƯỜI DÙNG**: $notes_reminder

Hãy tạo kế hoạch ngay bây giờ:""")

CHAT_TEMPLATE = Template("""\
Bạn là chuyên gia dinh dưỡng AI của ứng dụng "Dinh Dưỡng Thông Minh".
$context_block
CÂU HỎI: $message

Hãy trả lời ngắn gọn (2-3 đoạn), thân thiện, bằng tiếng Việt. Ưu tiên món ăn Việt Nam.""")


def build_meal_plan_prompt(request: PlanRequest) -> str:
    """Render the plan-generation instruction for a request."""
    goal = resolve_goal(request.goal)
    budget = resolve_budget(request.budget)
    notes = request.notes.strip()
    return MEAL_PLAN_TEMPLATE.substitute(
        days=request.day_count,
        goal_label=goal.label,
        goal_description=goal.description,
        calories=goal.calories,
        budget_label=budget.label,
        budget_description=budget.description,
        budget_guidance=budget.guidance,
        notes_clause=f"\n- Ghi chú từ người dùng: {notes}" if notes else "",
        notes_reminder=notes or NO_SPECIAL_REQUEST,
    )


def build_chat_prompt(message: str, context: ChatContext | None = None) -> str:
    """Render the chat prompt, listing only the context fields that are set."""
    lines = _context_lines(context) if context else []
    context_block = ""
    if lines:
        context_block = "\nTHÔNG TIN NGƯỜI DÙNG:\n" + "\n".join(lines) + "\n"
    return CHAT_TEMPLATE.substitute(context_block=context_block, message=message)


def _context_lines(context: ChatContext) -> list[str]:
    lines = []
    if context.weight:
        lines.append(f"- Cân nặng: {_format_number(context.weight)} kg")
    if context.height:
        lines.append(f"- Chiều cao: {_format_number(context.height)} cm")
    if context.goal:
        profile = resolve_goal(context.goal)
        lines.append(f"- Mục tiêu: {profile.chat_label}")
    if context.tdee:
        lines.append(f"- TDEE: {_format_number(context.tdee)} kcal/ngày")
    return lines


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)
