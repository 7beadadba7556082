"""RPN表达式求值器 - 调用统一的Operator枚举"""
import logging

from core.errors import InvalidExpression, InvalidNumberLiteral, StackUnderflow
from core.token_system import TokenType, format_tokens

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估后缀Token序列的值"""

    @staticmethod
    def parse_number(text):
        """数字文本 -> float，失败抛出InvalidNumberLiteral"""
        try:
            return float(text)
        except ValueError:
            raise InvalidNumberLiteral(f"Invalid number literal: {text!r}") from None

    @staticmethod
    def evaluate(postfix_tokens):
        """
        评估后缀表达式
        Args:
            postfix_tokens: to_postfix() 的输出
        Returns:
            float结果
        """
        stack = []

        for token in postfix_tokens:
            if token.type is TokenType.NUMBER:
                stack.append(RPNEvaluator.parse_number(token.text))

            elif token.type is TokenType.OPERATOR:
                op = token.to_operator()
                if len(stack) < op.arity:
                    raise StackUnderflow(
                        f"Insufficient operands for '{token}': need {op.arity}, have {len(stack)}"
                    )
                # ================== 一元操作符 ==================
                if op.is_unary:
                    operand = stack.pop()
                    stack.append(op.apply(operand))
                # ================== 二元操作符 ==================
                else:
                    operand2 = stack.pop()
                    operand1 = stack.pop()
                    stack.append(op.apply(operand1, operand2))

            else:
                raise InvalidExpression(f"Unexpected parenthesis in postfix sequence: {token}")

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            logger.debug(f"RPN expression: {format_tokens(postfix_tokens)}")
            raise InvalidExpression(
                f"Stack has {len(stack)} elements after evaluation, expected 1"
            )
        return stack[0]
